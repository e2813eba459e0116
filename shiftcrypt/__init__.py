"""In-place byte-shift encryption and decryption of directory trees using worker threads."""

__version__ = "0.1.0"