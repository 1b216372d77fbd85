"""Provider-agnostic container management for blob stores.

This package provides:
- A single ContainerManager facade over S3, Azure Blob, Swift, local
  filesystem and in-memory backends
- Uniform container name validation ahead of any backend call
- Translation of backend failures into a small set of portable errors

Note: Object-level (blob) operations are not part of this package.
"""

__all__ = ["core"]
