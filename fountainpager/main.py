import argparse
import sys

import fountainpager
import fountainpager.config as config
import fountainpager.export as export
import fountainpager.log as log
import fountainpager.util as util

logger = log.getLogger("main")

def parseArgs(argv):
    parser = argparse.ArgumentParser(prog = "fountainpager",
        description = "Paginate a Fountain screenplay into a PDF.")
    parser.add_argument("--version", action = "version",
                        version = "%(prog)s " + fountainpager.__version__)
    parser.add_argument("--conf", metavar = "FILE",
                        help = "settings file with name:value lines")
    parser.add_argument("-o", "--output", metavar = "FILE",
                        help = "PDF file to write (default: a temp file)")
    parser.add_argument("-v", "--verbose", action = "store_true",
                        help = "log page break decisions")
    parser.add_argument("script", help = "Fountain script to paginate")

    return parser.parse_args(argv)

def main(argv = None):
    args = parseArgs(sys.argv[1:] if argv is None else argv)

    log.setupLogging("DEBUG" if args.verbose else "INFO")

    cfg = config.Config()

    # file being read, for decode errors which don't carry the name
    current = args.conf

    try:
        if args.conf:
            unknown = cfg.load(util.loadFile(args.conf))

            for name in unknown:
                logger.warning("unknown setting '%s' in %s", name,
                               args.conf)

        current = args.script
        text = util.loadFile(args.script)
    except OSError as e:
        logger.error("cannot read %s: %s", e.filename, e.strerror)

        return 1
    except UnicodeDecodeError as e:
        logger.error("cannot read %s: not UTF-8 text (%s)", current, e.reason)

        return 1

    res = export.exportScreenplay(text, cfg, args.output)

    if res is None:
        return 1

    print(res)

    return 0

if __name__ == "__main__":
    sys.exit(main())
