# kanatype/keys.py


def normalize_key(key):
    """キーイベントの文字を1文字の小文字にする。

    ShiftやCtrlなどの修飾キー単体 ("Shift" のような2文字以上の名前) と
    空文字は None を返して無視させる。
    """
    if not key or len(key) > 1:
        return None
    return key.lower()


def iter_line_keys(line, start_key=" "):
    """input() で読んだ1行を1キーずつに分ける。

    空行 (Enterだけ) はスタートキーとして扱う。
    """
    if line == "":
        yield start_key
        return
    for ch in line:
        key = normalize_key(ch)
        if key is not None:
            yield key
