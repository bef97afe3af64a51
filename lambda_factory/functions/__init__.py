from .factory import PLACEHOLDER_IMAGE_URI, FunctionSpec, create

__all__ = ["PLACEHOLDER_IMAGE_URI", "FunctionSpec", "create"]
