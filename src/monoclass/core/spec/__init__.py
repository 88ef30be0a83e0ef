"""monoclass core specifications.

Describe the fundamental structure and core interfaces of the object model.

Types defined in this package are interface specifications only. The
implementation classes live in the sibling modules of `monoclass.core`.
"""

__all__ = []
