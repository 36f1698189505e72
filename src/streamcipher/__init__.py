from .version import __version__ as __version__

__title__ = "streamcipher"
__description__ = "An RC4-style stream cipher for text, with a small CLI."
__license__ = "Apache-2.0"
