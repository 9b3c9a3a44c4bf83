# upi_insights/outputs/__init__.py
from importlib import import_module


def get_output(name, config):
    """Instantiate the renderer registered under ``name`` in output_modules."""
    modules = config.get('output_modules', {})
    if name not in modules:
        raise KeyError(f"No output module configured for '{name}'")
    module_name, cls_name = modules[name].rsplit('.', 1)
    return getattr(import_module(module_name), cls_name)(config)
