"""
tabfields - Delimited text lines as editable field sequences.

Parse > Edit > Write
"""

__version__ = "0.1.0"

from tabfields.layout import DEFAULT_DELIMITER, LINE_TERMINATOR
from tabfields.fields import Fields, FieldRef, IndexOutOfRange
from tabfields.reader import FieldsReader
from tabfields.writer import FieldsWriter
from tabfields.delimited import FieldsIO
