# stringart_pattern/__init__.py
