"""Services — imperative shell around the pure rules in core/.

Invariants:
    - Services call stores through core/repository_protocols.py contracts
    - Services raise core/errors.py types and never translate them to HTTP
"""
