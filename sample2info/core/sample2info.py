#!/usr/bin/env python

"""
Take annotations given in the per-sample fields and add the mean, median,
min, or max to the site-level INFO.
"""

import argparse
import logging.config
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from pysam import VariantFile

from sample2info.core.aggregate import aggregate
from sample2info.core.header import augment_header
from sample2info.core.stat_kind import StatKind
from sample2info.utils.user_error import UserError, ConfigurationError
from sample2info.utils.vcf_io import open_vcf, read_variants, write_header, write_variant
from sample2info.utils.version import get_version
try:
    from sample2info.utils.logging_override import LOGGING  # type: ignore[import]
except ImportError:
    from sample2info.utils.logging_config import LOGGING

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample2InfoConfig:
    sample_field: str
    info_field: str
    stat_kind: StatKind = StatKind.MEAN


class Sample2InfoArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ConfigurationError('%s', message)


def get_parser() -> argparse.ArgumentParser:
    parser = Sample2InfoArgumentParser(
        prog='vcfsample2info',
        description=__doc__,
        epilog='Type: transformation')
    parser.add_argument('vcf',
                        nargs='?',
                        help='Input VCF or BCF file, plain or compressed. '
                             'Reads standard input if omitted.')
    parser.add_argument('-f', '--field',
                        help='Add information about this field in samples '
                             'to INFO column.')
    parser.add_argument('-i', '--info',
                        help='Store the computed statistic in this info field.')
    stat_group = parser.add_argument_group('statistic',
                                           'If more than one is given, the '
                                           'last one wins.')
    stat_group.add_argument('-a', '--average',
                            dest='stat_kind',
                            action='store_const',
                            const=StatKind.MEAN,
                            default=StatKind.MEAN,
                            help='Take the mean of samples for field (default).')
    stat_group.add_argument('-m', '--median',
                            dest='stat_kind',
                            action='store_const',
                            const=StatKind.MEDIAN,
                            help='Use the median.')
    stat_group.add_argument('-n', '--min',
                            dest='stat_kind',
                            action='store_const',
                            const=StatKind.MIN,
                            help='Use the min.')
    stat_group.add_argument('-x', '--max',
                            dest='stat_kind',
                            action='store_const',
                            const=StatKind.MAX,
                            help='Use the max.')
    parser.add_argument('--version',
                        action='version',
                        version=get_version())

    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument('--verbose', action='store_true',
                                 help='Increase output verbosity.')
    verbosity_group.add_argument('--debug', action='store_true',
                                 help='Maximum output verbosity.')
    verbosity_group.add_argument('--quiet', action='store_true',
                                 help='Minimize output verbosity.')
    return parser


def configure_logging(args: argparse.Namespace) -> None:
    package_logger = logging.getLogger('sample2info')
    if args.quiet:
        package_logger.setLevel(logging.ERROR)
    elif args.debug:
        package_logger.setLevel(logging.DEBUG)
    elif args.verbose:
        package_logger.setLevel(logging.INFO)
    else:
        package_logger.setLevel(logging.WARNING)


def build_config(args: argparse.Namespace) -> Sample2InfoConfig:
    if not args.info or not args.field:
        raise ConfigurationError(
            'Both a sample field and an info field are required.')
    return Sample2InfoConfig(sample_field=args.field,
                             info_field=args.info,
                             stat_kind=args.stat_kind)


def sample2info(vcf_file: VariantFile,
                out: TextIO,
                config: Sample2InfoConfig,
                path: Optional[str] = None) -> int:
    """ Copy a VCF, adding a summary of a sample field to each record.

    The header is written before any record is read, and each record is
    written as soon as it is processed.
    :return: the number of records written
    """
    header = augment_header(vcf_file.header,
                            config.info_field,
                            config.stat_kind,
                            config.sample_field)
    write_header(header, out)

    variant_count = 0
    for variant in read_variants(vcf_file, path):
        aggregate(variant,
                  config.sample_field,
                  config.info_field,
                  config.stat_kind)
        write_variant(variant, out)
        variant_count += 1
    logger.info('Wrote %d records with %s of %s in %s.',
                variant_count,
                config.stat_kind.value,
                config.sample_field,
                config.info_field)
    return variant_count


def main(argv: Sequence[str], out: Optional[TextIO] = None) -> int:
    if out is None:
        out = sys.stdout
    parser = get_parser()
    if not argv:
        parser.print_help(out)
        return 0
    args = parser.parse_args(argv)
    configure_logging(args)
    config = build_config(args)
    with open_vcf(args.vcf) as vcf_file:
        sample2info(vcf_file, out, config, args.vcf)
    return 0


def entry() -> None:
    logging.config.dictConfig(LOGGING)
    try:
        rc = main(sys.argv[1:])
        logger.debug("Done.")
    except BrokenPipeError:
        logger.debug("Broken pipe.")
        rc = 1
    except KeyboardInterrupt:
        logger.debug("Interrupted.")
        rc = 1
    except UserError as e:
        logger.fatal(e.fmt, *e.fmt_args)
        rc = e.code

    sys.exit(rc)


if __name__ == "__main__": entry()  # noqa
