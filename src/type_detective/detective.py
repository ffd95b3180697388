import logging
import pathlib
from typing import Any, Optional

from .config import Mode, TypeDetectiveConfig, get_config
from .inference import infer_expression, resolve_config
from .rendering import generate_type_declaration, new_type_name, render
from .type_expressions import TypeExpression

logger = logging.getLogger(__name__)


class TypeDetective:
    """Type inference with its own settings, independent of the process-wide defaults

    Options are the same as for configure(); anything not given is taken from the defaults
    current at construction time.
    """

    def __init__(self, config: Optional[TypeDetectiveConfig] = None, **options: Any) -> None:
        self.config = (config or get_config()).updated(**options)

    def with_options(self, **options: Any) -> "TypeDetective":
        return TypeDetective(self.config, **options)

    def infer_expression(self, value: Any, indent_level: int = 0, mode: Optional[Mode] = None) -> TypeExpression:
        return infer_expression(value, indent_level, resolve_config(self.config, mode))

    def infer_type(self, value: Any, indent_level: int = 0, mode: Optional[Mode] = None) -> str:
        config = resolve_config(self.config, mode)
        return render(infer_expression(value, indent_level, config), config)

    def detect_type(self, value: Any, indent_level: int = 0, mode: Optional[Mode] = None) -> str:
        return self.infer_type(value, indent_level, mode)

    def generate_type_definition(self, value: Any, type_name: str) -> str:
        return generate_type_declaration(new_type_name(type_name), self.infer_type(value))

    def write_type_definition(self, filename: pathlib.Path, type_name: str, value: Any) -> None:
        if filename.exists():
            raise FileExistsError(str(filename))
        filename.write_text(self.generate_type_definition(value, type_name))
        logger.debug("Type definition %s written to %s", type_name, filename)
