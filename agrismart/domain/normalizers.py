import re
from typing import Any, Optional


class AliasNormalizer:
    # one table per vocabulary: alias -> canonical
    ALIASES: dict[str, dict[str, str]] = {
        "crop": {
            "rice": "Rice",
            "paddy": "Rice",
            "dhan": "Rice",
            "wheat": "Wheat",
            "gehun": "Wheat",
            "maize": "Maize",
            "corn": "Maize",
            "makka": "Maize",
            "cotton": "Cotton",
            "kapas": "Cotton",
            "tomato": "Tomato",
            "tamatar": "Tomato",
            "potato": "Potato",
            "aloo": "Potato",
            "onion": "Onion",
            "pyaz": "Onion",
            "pulses": "Pulses",
            "dal": "Pulses",
            "sugarcane": "Sugarcane",
            "ganna": "Sugarcane",
            "groundnut": "Groundnut",
            "peanut": "Groundnut",
        },
        "season": {
            "kharif": "Kharif",
            "monsoon": "Kharif",
            "rabi": "Rabi",
            "winter": "Rabi",
            "zaid": "Zaid",
            "summer": "Zaid",
        },
    }

    @staticmethod
    def _canon_key(x: Any) -> str:
        # trim, lowercase, collapse inner whitespace
        s = str(x).strip().lower()
        s = re.sub(r"\s+", " ", s)
        return s

    @classmethod
    def canonical(cls, kind: str, value: Any) -> Optional[str]:
        """Canonical name for ``value``, or None when it is empty or unknown."""
        if value is None:
            return None
        key = cls._canon_key(value)
        if not key:
            return None
        return cls.ALIASES.get(kind, {}).get(key)

    @classmethod
    def normalize(cls, kind: str, value: Any) -> Any:
        if value is None:
            return value
        hit = cls.canonical(kind, value)
        # unknown values pass through untouched
        return hit if hit is not None else value


def same_label(left: Optional[str], right: Optional[str]) -> bool:
    if left is None or right is None:
        return False
    return AliasNormalizer._canon_key(left) == AliasNormalizer._canon_key(right)
