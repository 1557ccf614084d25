# model/__init__.py
