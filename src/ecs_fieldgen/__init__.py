"""Schema-driven code generator for nested field-definition documents."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
