# upi_insights/storage/__init__.py
from importlib import import_module


def get_storage(config):
    name = config.get('storage', {}).get('backend', 'json')
    path = config['storage_backends'][name]
    module_name, cls_name = path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)(config)
