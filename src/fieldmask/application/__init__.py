"""Application – masking use cases built on the kernel and config layers."""
