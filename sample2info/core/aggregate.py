import logging
import re
from typing import List

from pysam import VariantRecord

from sample2info.core.stat_kind import StatKind
from sample2info.utils.user_error import UserError
from sample2info.utils.vcf_io import get_location

logger = logging.getLogger(__name__)

MISSING = '.'
NUMBER_PATTERN = re.compile(r'[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?')


class MultiValueFieldError(UserError):
    pass


class NumericParseError(UserError):
    pass


def split_values(value) -> List[object]:
    """ List the values pysam gives for one sample field, without missing ones.

    Numeric fields come back as a number or a tuple, depending on the
    declared Number. String fields declared with Number=1 come back as one
    string, even when it holds a comma-separated list.
    """
    if isinstance(value, tuple):
        values = list(value)
    elif isinstance(value, str):
        values = value.split(',')
    else:
        values = [value]
    return [item for item in values if item is not None and item != MISSING]


def parse_number(value, sample_field: str, sample_name: str, location: str) -> float:
    if isinstance(value, str):
        if not NUMBER_PATTERN.fullmatch(value):
            raise NumericParseError('Invalid number %r for %s in sample %s at %s.',
                                    value,
                                    sample_field,
                                    sample_name,
                                    location)
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise NumericParseError('Invalid number %r for %s in sample %s at %s.',
                                value,
                                sample_field,
                                sample_name,
                                location)


def collect_values(variant: VariantRecord, sample_field: str) -> List[float]:
    """ Parse one sample field from every sample that has it.

    Samples are visited in header column order. Samples without the field,
    or with the missing value '.', are skipped.
    :raises MultiValueFieldError: if a sample has more than one value
    :raises NumericParseError: if a value isn't a plain decimal number
    """
    location = get_location(variant)
    values = []
    for sample_name, sample in variant.samples.items():
        if sample_field not in sample:
            continue
        field_values = split_values(sample[sample_field])
        if not field_values:
            continue
        if len(field_values) > 1:
            raise MultiValueFieldError(
                'Cannot handle sample fields with multiple values: '
                '%s=%s in sample %s at %s.',
                sample_field,
                ','.join(str(item) for item in field_values),
                sample_name,
                location)
        values.append(parse_number(field_values[0],
                                   sample_field,
                                   sample_name,
                                   location))
    return values


def aggregate(variant: VariantRecord,
              sample_field: str,
              info_field: str,
              stat_kind: StatKind) -> VariantRecord:
    """ Summarize a sample field across samples into an INFO field.

    The INFO field must already be declared in the variant's header. Any
    earlier value of the INFO field is replaced. When no sample has a value,
    the variant is returned unchanged.
    """
    values = collect_values(variant, sample_field)
    if not values:
        logger.debug('No %s values at %s, leaving it unchanged.',
                     sample_field,
                     get_location(variant))
        return variant
    variant.info[info_field] = stat_kind.compute(values)
    return variant
