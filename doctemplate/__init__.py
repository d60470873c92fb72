"""Schema-driven document template engine.

Resolves declarative templates (ordered sections, typed fields, table
columns) against a data record into presentation-agnostic render nodes.
"""

__version__ = "1.0.0"
