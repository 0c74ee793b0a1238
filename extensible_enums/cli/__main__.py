from . import extensible_enums

extensible_enums(prog_name="extensible-enums")
