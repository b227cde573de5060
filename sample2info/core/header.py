from pysam import VariantHeader

from sample2info.core.stat_kind import StatKind


def build_info_line(info_field: str,
                    stat_kind: StatKind,
                    sample_field: str) -> str:
    return (f'##INFO=<ID={info_field},Number=1,Type=Float,'
            f'Description="Summary statistic generated by {stat_kind.value} '
            f'of per-sample values of {sample_field} ">')


def augment_header(header: VariantHeader,
                   info_field: str,
                   stat_kind: StatKind,
                   sample_field: str) -> VariantHeader:
    """ Declare the summary INFO field in the header.

    Records read from a file after its header is augmented can hold the new
    field. An existing declaration with the same ID is dropped, so the
    header never declares the field twice.
    """
    if info_field in header.info:
        header.info.remove_header(info_field)
    header.add_line(build_info_line(info_field, stat_kind, sample_field))
    return header
