"""Type rendering, name synthesis and zero values for interface methods."""

from gostub.core.collector import InterfaceCollector, make_param
from gostub.core.naming import NameSynthesizer, make_ident_name
from gostub.core.renderer import render, render_signature, render_types
from gostub.core.zero_value import ZeroValueResolver

__all__ = [
    "InterfaceCollector",
    "NameSynthesizer",
    "ZeroValueResolver",
    "make_ident_name",
    "make_param",
    "render",
    "render_signature",
    "render_types",
]
