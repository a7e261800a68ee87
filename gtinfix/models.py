# gtinfix/models.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from gtinfix.codes import SUPPORTED_LENGTHS, FixError, fix, verify


class GtinCode(BaseModel):
    """
    A GTIN that passed validation.

    With repair=True (default) the code goes through fix(), so surrounding
    whitespace and lost leading zeros are corrected; with repair=False it must
    already be valid. Failures show up as ValidationError entries of type
    'gtin_<kind>' (gtin_non_ascii, gtin_too_long, gtin_check_digit).
    """

    model_config = ConfigDict(frozen=True)

    length: int = 13
    repair: bool = True
    code: str

    @field_validator("length")
    @classmethod
    def validate_length(cls, v: int) -> int:
        if v not in SUPPORTED_LENGTHS:
            raise ValueError(f"Unsupported GTIN length {v} (must be 8/12/13/14).")
        return v

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str, info: ValidationInfo) -> str:
        length = info.data.get("length")
        if length is None:
            # length itself failed; that error is already reported
            return v
        try:
            if info.data.get("repair", True):
                return fix(v, length)
            return verify(v, length)
        except FixError as e:
            raise PydanticCustomError(f"gtin_{e.kind}", str(e)) from e
