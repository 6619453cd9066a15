# errorchain/infra/observability/__init__.py
