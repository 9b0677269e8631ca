"""Kernel naming – canonical <-> compact flag name forms."""
from feature_control.kernel.naming.case import (
    SEPARATOR,
    from_camel_case,
    is_alternate_form,
    strip_separators,
    to_camel_case,
)

__all__ = ["SEPARATOR", "from_camel_case", "is_alternate_form", "strip_separators", "to_camel_case"]
