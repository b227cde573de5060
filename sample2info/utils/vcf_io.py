"""
Read VCF records with pysam, and write them back out as text.

Records are written through a text stream instead of a pysam output file, so
the header and each record reach the caller's stream as soon as they are
ready.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from pysam import VariantFile, VariantHeader, VariantRecord

from sample2info.utils.user_error import UserError

logger = logging.getLogger(__name__)

STDIN_NAME = '-'


class VcfFormatError(UserError):
    pass


def describe(path: Optional[str]) -> str:
    return 'standard input' if path in (None, STDIN_NAME) else repr(path)


@contextmanager
def open_vcf(path: Optional[str]) -> Iterator[VariantFile]:
    """ Open a VCF or BCF file for reading, plain or compressed.

    :param path: file name, or None or '-' to read standard input.
    """
    if path is None:
        path = STDIN_NAME
    logger.debug('Opening %s.', describe(path))
    try:
        vcf_file = VariantFile(path)
    except (OSError, ValueError) as ex:
        raise VcfFormatError('Cannot read input VCF %s: %s.', describe(path), ex)
    with vcf_file:
        yield vcf_file


def read_variants(vcf_file: VariantFile,
                  path: Optional[str] = None) -> Iterator[VariantRecord]:
    """ Iterate over records, reporting unreadable input as a VcfFormatError. """
    records = iter(vcf_file)
    while True:
        try:
            record = next(records)
        except StopIteration:
            return
        except (OSError, ValueError) as ex:
            raise VcfFormatError('Cannot read input VCF %s: %s.',
                                 describe(path),
                                 ex)
        yield record


def write_header(header: VariantHeader, out: TextIO):
    out.write(str(header))


def write_variant(variant: VariantRecord, out: TextIO):
    out.write(str(variant))


def get_location(variant: VariantRecord) -> str:
    return f'{variant.chrom}:{variant.pos}'
