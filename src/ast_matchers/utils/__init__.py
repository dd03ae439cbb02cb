"""
Utilities Package.

Inspection helpers that sit outside the rewriting core:
- Console and logging setup (Rich)
- Tree rendering
"""
