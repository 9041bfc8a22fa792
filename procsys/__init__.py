"""Read and tune Linux kernel variables exposed under /proc/sys."""

__version__ = "0.1.0"
__all__ = ["binfmt_misc", "epoll", "fs", "kernel", "keys", "procfile", "random_pool", "vm"]