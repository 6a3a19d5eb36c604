"""Events module - entry points.

TIER 3: Entry points, may import from all layers.

Handlers:
- strip.py: stdin → stdout comment stripping filter
- send.py: "Send (Strip Comments)" action on a request read from stdin
"""
