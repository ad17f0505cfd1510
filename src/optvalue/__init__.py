from optvalue.core.value import Value, from_nullable, new, none, some
from optvalue.logging_config import configure_logging

__all__ = ["Value", "new", "some", "none", "from_nullable", "configure_logging"]
