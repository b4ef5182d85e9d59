# exception classes


class PagerError(Exception):
    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)


# document writer could not be set up or could not produce its output
class WriterError(PagerError):
    def __init__(self, msg):
        PagerError.__init__(self, msg)


class LayoutError(PagerError):
    def __init__(self, msg):
        PagerError.__init__(self, msg)
