"""
Code generators consuming a `Contract`.
"""

from inkwell.codegen.base import GenerateCode, generate_code
from inkwell.codegen.original import OriginalGenerator

__all__ = ["GenerateCode", "OriginalGenerator", "generate_code"]
