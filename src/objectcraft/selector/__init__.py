from objectcraft.selector.builder import SelectorBuilder, SelectorExpression, selector
from objectcraft.selector.model import Combinator, Fragment, PartKind

__all__ = [
    "Combinator",
    "Fragment",
    "PartKind",
    "SelectorBuilder",
    "SelectorExpression",
    "selector",
]
