# commonkit/utils/__init__.py
