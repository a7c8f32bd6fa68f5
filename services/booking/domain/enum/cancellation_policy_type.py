from enum import Enum


class CancellationPolicyType(str, Enum):
    """ガイドが設定するキャンセルポリシー"""

    FLEXIBLE = "flexible"
    MODERATE = "moderate"
    STRICT = "strict"
    SUPER_STRICT = "super_strict"
    NON_REFUNDABLE = "non_refundable"
