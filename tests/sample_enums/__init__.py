"""Sample enumerations split across modules.

``colors`` declares the primary enumeration; ``colors_extension`` adds a case
from a separate module, the way a downstream package would. Importing this
package links both.
"""

from .colors import Color, Colors
from .colors_extension import MoreColors
from .shapes import Shape, Shapes, Swatches

__all__ = ["Color", "Colors", "MoreColors", "Shape", "Shapes", "Swatches"]
