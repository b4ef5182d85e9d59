import os
import tempfile
import time

import fountainpager.config as config
import fountainpager.log as log
import fountainpager.mypager as mypager
import fountainpager.writer as writer

logger = log.getLogger("export")

# default output file for an export that wasn't given one
def defaultOutPath():
    return os.path.join(tempfile.gettempdir(),
                        "fountain-export-%d.pdf" % int(time.time() * 1000))

# paginate script 'text' and render it. 'cfg' is a config.Config (the
# defaults if None). the document goes to 'dw' if given, otherwise to a
# PDF file at 'outPath'. returns the output location, or None if there
# was nothing to export or the export failed; failures are logged here
# and nowhere else.
def exportScreenplay(text, cfg = None, outPath = None, dw = None):
    if text is None:
        logger.warning("no script to export")

        return None

    if cfg is None:
        cfg = config.Config()

    geom = cfg.getGeometry()

    try:
        if dw is None:
            dw = writer.PMLWriter(geom, outPath or defaultOutPath())

        dw.font(cfg.fontPath)
        dw.fontSize(cfg.fontSize)
        dw.setLineGap(cfg.lineGap)

        pager = mypager.Pager(dw, geom, cfg.getOptions())
        res = pager.generate(text)

    # a half-done pagination is useless, so whatever went wrong the
    # whole export is abandoned
    except Exception:
        logger.exception("screenplay export failed")

        return None

    logger.info("exported %d pages, %d scenes to %s", pager.pageCount,
                len(pager.scenes), res)

    return res
