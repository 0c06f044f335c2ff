# Author: Trevor Perrin
# See the LICENSE file for legal information regarding use of this file.

"""Toolkit for certificate encodings."""

__all__ = ["pem"]
