import re

# ASCII digits only; \d would also accept other Unicode decimal digits
ZIP_CODE_PATTERN = r"^[0-9]{5}(?:-[0-9]{4})?$"
_ZIP_CODE_RE = re.compile(ZIP_CODE_PATTERN)


def is_valid_zip_code(value: str | None) -> bool:
    """True for ``NNNNN`` or ``NNNNN-NNNN``; false for anything else, including None."""
    if not value or not value.strip():
        return False
    return _ZIP_CODE_RE.fullmatch(value) is not None
