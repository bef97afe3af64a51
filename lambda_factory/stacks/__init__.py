from .container_function_stack import ContainerFunctionStack

__all__ = ["ContainerFunctionStack"]
