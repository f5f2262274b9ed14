"""greeter: saludo opcionalmente personalizado, con CLI y tests (unit + integration)."""

__version__ = "0.1.0"

from greeter.greeting import DEFAULT_GREETING, greet, is_blank

__all__ = ["DEFAULT_GREETING", "greet", "is_blank", "__version__"]
