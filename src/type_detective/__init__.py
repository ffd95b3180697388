from .config import ArrayStyle, IndentType, Mode, TypeDetectiveConfig, configure, get_config
from .detective import TypeDetective
from .inference import detect_type, infer_expression, infer_type
from .rendering import generate_type_declaration, render
from .utils import UNDEFINED

__all__ = [
    "ArrayStyle",
    "IndentType",
    "Mode",
    "TypeDetective",
    "TypeDetectiveConfig",
    "UNDEFINED",
    "configure",
    "detect_type",
    "generate_type_declaration",
    "get_config",
    "infer_expression",
    "infer_type",
    "render",
]
