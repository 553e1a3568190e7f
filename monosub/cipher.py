from .mapping import SubstitutionTable, load_mapping_file, parse_mapping


class Cipher:
    """Monoalphabetic substitution over a SubstitutionTable.

    Characters missing from the table pass through unchanged, so both
    directions are total and keep the text length.
    """

    def __init__(self, table: SubstitutionTable):
        self.table = table
        self._enc = str.maketrans(dict(table.forward))
        self._dec = str.maketrans(dict(table.inverse))

    @classmethod
    def from_text(cls, spec: str, strict: bool = False) -> "Cipher":
        return cls(parse_mapping(spec, strict=strict))

    @classmethod
    def from_file(cls, path: str, strict: bool = False) -> "Cipher":
        return cls(load_mapping_file(path, strict=strict))

    def encrypt(self, text: str) -> str:
        return text.translate(self._enc)

    def decrypt(self, text: str) -> str:
        return text.translate(self._dec)

    def apply(self, text: str, decrypt: bool = False) -> str:
        return self.decrypt(text) if decrypt else self.encrypt(text)
