from blockdoc.forms.field import SirTrevorField

__all__ = ["SirTrevorField"]
