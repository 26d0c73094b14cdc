"""Credit segmentation from identity code suffix"""

from loan_decision.config import Settings
from loan_decision.domain.models import CreditSegment


def resolve_segment(segment_key: int) -> CreditSegment:
    """
    Map the last four digits of an identity code to a credit segment.

    Segments:
    - 0000-2499: Debt (no loan possible)
    - 2500-4999: Segment 1
    - 5000-7499: Segment 2
    - 7500-9999: Segment 3
    """
    if segment_key < 2500:
        return CreditSegment.DEBT
    elif segment_key < 5000:
        return CreditSegment.SEGMENT_1
    elif segment_key < 7500:
        return CreditSegment.SEGMENT_2
    else:
        return CreditSegment.SEGMENT_3


def resolve_credit_modifier(segment_key: int, settings: Settings) -> int:
    """Credit modifier for a segment key; 0 means the applicant has debt"""
    return settings.credit_modifier_for(resolve_segment(segment_key))
