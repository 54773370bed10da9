from .container import AppContainer, create_app_container, create_in_memory_container

__all__ = ["AppContainer", "create_app_container", "create_in_memory_container"]
