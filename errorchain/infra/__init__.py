# errorchain/infra/__init__.py
"""
Integrations with external systems. Optional; not imported by errorchain.
"""
