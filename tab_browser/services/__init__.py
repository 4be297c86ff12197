from .workbench import Workbench, build_view_registry, create_workbench

__all__ = ["Workbench", "build_view_registry", "create_workbench"]
