# kanatype/errors.py


class KanaTypeError(ValueError):
    """問題データ (設定) の誤り"""


class UnknownKanaError(KanaTypeError):
    """表にない文字が問題のかなに含まれている"""

    def __init__(self, kana, index, unit):
        self.kana = kana
        self.index = index
        self.unit = unit
        super().__init__(f"untypeable unit {unit!r} at {index} in {kana!r}")


class QuestionFormatError(KanaTypeError):
    """問題ファイルの書式エラー"""

    def __init__(self, path, line_no, line):
        self.path = path
        self.line_no = line_no
        self.line = line
        super().__init__(f"{path}:{line_no}: malformed question line {line!r}")
