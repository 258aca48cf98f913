import hashlib

ELF_MAGIC = b"\x7fELF"
PE_MAGIC = b"MZ"
MACHO_MAGICS = [b"\xfe\xed\xfa\xce", b"\xfe\xed\xfa\xcf", b"\xce\xfa\xed\xfe", b"\xcf\xfa\xed\xfe", b"\xca\xfe\xba\xbe"]


class BinaryInfo(object):
    """ simple DTO to contain the binary/buffer whose symbols are to be demangled """

    raw_data = b""
    binary_size = 0
    file_path = ""
    sha256 = ""

    def __init__(self, binary=b"", file_path=""):
        self.raw_data = binary
        self.file_path = file_path
        self.binary_size = len(binary)
        self.sha256 = hashlib.sha256(binary).hexdigest()

    def getData(self):
        """Returns raw_data, lazily read from file_path if no buffer was given"""
        if not self.raw_data and self.file_path:
            with open(self.file_path, "rb") as fin:
                self.raw_data = fin.read()
            self.binary_size = len(self.raw_data)
            self.sha256 = hashlib.sha256(self.raw_data).hexdigest()
        return self.raw_data

    def getFormat(self):
        data = self.getData()
        if data[:4] == ELF_MAGIC:
            return "elf"
        if data[:2] == PE_MAGIC:
            return "pe"
        if data[:4] in MACHO_MAGICS:
            return "macho"
        return ""
