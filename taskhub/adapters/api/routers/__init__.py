# taskhub/adapters/api/routers/__init__.py
