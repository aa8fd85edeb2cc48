"""
License 检查

未配置 license key 时为免费版；key 格式合法（≥ 8 位，仅大写字母 / 数字 / 连字符）
时为付费版。真正的授权服务不在本项目范围内。
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional

FREE_FEATURES = ["basic-generation"]
PAID_FEATURES = [
    "basic-generation",
    "advanced-ai",
    "component-reuse",
    "bulk-export",
    "custom-mappings",
]

_KEY_RE = re.compile(r"^[A-Z0-9-]+$")


@dataclass
class LicenseInfo:
    is_valid: bool
    tier: str                                   # free / paid
    features: List[str] = field(default_factory=list)

    def has_feature(self, feature: str) -> bool:
        return self.is_valid and feature in self.features


def validate_license(license_key: Optional[str]) -> LicenseInfo:
    key = (license_key or "").strip()
    if not key:
        return LicenseInfo(is_valid=True, tier="free", features=list(FREE_FEATURES))

    if len(key) >= 8 and _KEY_RE.match(key):
        return LicenseInfo(is_valid=True, tier="paid", features=list(PAID_FEATURES))
    return LicenseInfo(is_valid=False, tier="free", features=list(FREE_FEATURES))
