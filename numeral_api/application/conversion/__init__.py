"""
Application layer for the conversion bounded context.

Use cases coordinate the domain conversion functions and shape
their results into DTOs. No framework imports allowed.
"""
