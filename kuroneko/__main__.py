import argparse
import logging
import sys

from .configuration import ConfigError, load_config
from .errors import KuronekoError, UsageError
from .formatting import formatter_for
from .report import DETAIL_LAYOUT
from .service import YamatoService
from .tracker import (MAX_SERIAL, MIN_SERIAL, SERIAL_RANGE_MESSAGE, Tracker,
    request_mode)

NORMAL = 0
ABNORMAL = 1

class ArgumentParser(argparse.ArgumentParser):
    """Raises UsageError instead of exiting on bad arguments
    """
    def error(self, message):
        raise UsageError(message)

def build_parser():
    parser = ArgumentParser(prog='kuroneko', usage='%(prog)s [flags] 伝票番号',
        description='ヤマト運輸のステータス取得')
    parser.add_argument('tracking_numbers', nargs='*', metavar='伝票番号')
    parser.add_argument('-s', '--serial', type=int, default=None,
        help='連番取得(10件まで)')
    return parser

def parse_args(argv, formatter):
    args = build_parser().parse_args(argv)
    if len(args.tracking_numbers) > 1:
        raise UsageError('accepts at most 1 arg(s), received {0}'.format(
            formatter.error(str(len(args.tracking_numbers)))))
    if not args.tracking_numbers:
        raise UsageError(formatter.error('伝票番号を入力してください'))
    if args.serial is not None and not MIN_SERIAL <= args.serial <= MAX_SERIAL:
        raise UsageError(formatter.error(SERIAL_RANGE_MESSAGE))
    return args

def main(argv=None, out=None, err=None, config=None, service=None):
    """Run the command line interface, returns the exit code
    """
    if argv is None:
        argv = sys.argv[1:]
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    try:
        if config is None:
            config = load_config()
    except ConfigError as e:
        err.write('Error: {0}\n'.format(e))
        return ABNORMAL

    formatter = formatter_for(err, config)

    try:
        logging.basicConfig(stream=err,
            level=config.get_log_level('WARNING', 'kuroneko', 'log_level'))
        args = parse_args(argv, formatter)
        mode = request_mode(args.serial)
        layout = DETAIL_LAYOUT.with_rule_width(config.get_int(
            DETAIL_LAYOUT.rule_width, 'Report', 'rule_width'))
        tracker = Tracker(service or YamatoService(config),
            formatter_for(out, config), layout)
        out.write(tracker.track(args.tracking_numbers[0], mode))
    except (UsageError, ConfigError) as e:
        err.write('Error: {0}\n'.format(e))
        return ABNORMAL
    except KuronekoError as e:
        err.write('Error: {0}\n'.format(formatter.error(str(e))))
        return ABNORMAL
    return NORMAL

if __name__ == '__main__':
    sys.exit(main())
