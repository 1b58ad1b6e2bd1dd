"""Faith Whisperer prayer board application package.

Declared as a regular package so ``app`` resolves to this project rather than
an unrelated namespace package from site-packages.
"""
