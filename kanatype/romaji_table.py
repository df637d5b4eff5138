# kanatype/romaji_table.py
"""
ひらがな → ローマ字 の対応表。

MONOGRAPHS: 1文字のかな → 受け付けるローマ字 (先頭がヒント表示に使われる)
DIGRAPHS:   2文字の組み合わせ (拗音など) → 受け付けるローマ字

どちらも読み取り専用。並び順はそのまま候補の優先順位になる。
"""
from types import MappingProxyType

GEMINATE = "っ"  # 促音
NASAL = "ん"     # 撥音
VOWELS = frozenset("aiueo")

_MONOGRAPHS = {
    # 清音
    "あ": ("a",), "い": ("i", "yi"), "う": ("u", "wu", "whu"), "え": ("e",), "お": ("o",),
    "か": ("ka", "ca"), "き": ("ki",), "く": ("ku", "cu", "qu"), "け": ("ke",), "こ": ("ko", "co"),
    "さ": ("sa",), "し": ("shi", "si", "ci"), "す": ("su",), "せ": ("se", "ce"), "そ": ("so",),
    "た": ("ta",), "ち": ("chi", "ti"), "つ": ("tsu", "tu"), "て": ("te",), "と": ("to",),
    "な": ("na",), "に": ("ni",), "ぬ": ("nu",), "ね": ("ne",), "の": ("no",),
    "は": ("ha",), "ひ": ("hi",), "ふ": ("fu", "hu"), "へ": ("he",), "ほ": ("ho",),
    "ま": ("ma",), "み": ("mi",), "む": ("mu",), "め": ("me",), "も": ("mo",),
    "や": ("ya",), "ゆ": ("yu",), "よ": ("yo",),
    "ら": ("ra",), "り": ("ri",), "る": ("ru",), "れ": ("re",), "ろ": ("ro",),
    "わ": ("wa",), "を": ("wo",),
    # 単独の "n" は後ろの文字次第なので engine 側で足す
    "ん": ("nn", "xn"),

    # 濁音
    "が": ("ga",), "ぎ": ("gi",), "ぐ": ("gu",), "げ": ("ge",), "ご": ("go",),
    "ざ": ("za",), "じ": ("ji", "zi"), "ず": ("zu",), "ぜ": ("ze",), "ぞ": ("zo",),
    "だ": ("da",), "ぢ": ("di",), "づ": ("du",), "で": ("de",), "ど": ("do",),
    "ば": ("ba",), "び": ("bi",), "ぶ": ("bu",), "べ": ("be",), "ぼ": ("bo",),
    "ゔ": ("vu",),

    # 半濁音
    "ぱ": ("pa",), "ぴ": ("pi",), "ぷ": ("pu",), "ぺ": ("pe",), "ぽ": ("po",),

    # 小文字単体 (x/l 始まり)
    "ぁ": ("xa", "la"), "ぃ": ("xi", "li"), "ぅ": ("xu", "lu"), "ぇ": ("xe", "le"), "ぉ": ("xo", "lo"),
    "ゃ": ("xya", "lya"), "ゅ": ("xyu", "lyu"), "ょ": ("xyo", "lyo"),
    "ゎ": ("xwa", "lwa"),
    "っ": ("xtu", "ltu", "xtsu", "ltsu"),

    # 記号など
    "ー": ("-",), "、": (",",), "。": (".",), "・": ("/",),
    "「": ("[",), "」": ("]",), "　": (" ",), " ": (" ",),
    "？": ("?",), "！": ("!",), "：": (":",), "；": (";",),
    "（": ("(",), "）": (")",), "＜": ("<",), "＞": (">",),
    "〜": ("~",), "～": ("~",),
    # NFKC 正規化後の半角記号
    "?": ("?",), "!": ("!",), ":": (":",), ";": (";",),
    "(": ("(",), ")": (")",), "<": ("<",), ">": (">",), "~": ("~",),
}

_DIGRAPHS = {
    # 拗音 (きゃ行など)
    "きゃ": ("kya", "kixya"), "きぃ": ("kyi", "kixi"), "きゅ": ("kyu", "kixyu"), "きぇ": ("kye", "kixe"), "きょ": ("kyo", "kixyo"),
    "ぎゃ": ("gya", "gixya"), "ぎぃ": ("gyi", "gixi"), "ぎゅ": ("gyu", "gixyu"), "ぎぇ": ("gye", "gixe"), "ぎょ": ("gyo", "gixyo"),
    "しゃ": ("sha", "sya", "sixya"), "しぃ": ("syi", "sixi"), "しゅ": ("shu", "syu", "sixyu"), "しぇ": ("she", "sye", "sixe"), "しょ": ("sho", "syo", "sixyo"),
    "じゃ": ("ja", "zya", "jya", "jixya"), "じぃ": ("zyi", "jyi", "jixi"), "じゅ": ("ju", "zyu", "jyu", "jixyu"), "じぇ": ("je", "zye", "jye", "jixe"), "じょ": ("jo", "zyo", "jyo", "jixyo"),
    "ちゃ": ("cha", "tya", "cya", "chixya"), "ちぃ": ("tyi", "cyi", "chixi"), "ちゅ": ("chu", "tyu", "cyu", "chixyu"), "ちぇ": ("che", "tye", "cye", "chixe"), "ちょ": ("cho", "tyo", "cyo", "chixyo"),
    "ぢゃ": ("dya", "dixya"), "ぢぃ": ("dyi", "dixi"), "ぢゅ": ("dyu", "dixyu"), "ぢぇ": ("dye", "dixe"), "ぢょ": ("dyo", "dixyo"),
    "にゃ": ("nya", "nixya"), "にぃ": ("nyi", "nixi"), "にゅ": ("nyu", "nixyu"), "にぇ": ("nye", "nixe"), "にょ": ("nyo", "nixyo"),
    "ひゃ": ("hya", "hixya"), "ひぃ": ("hyi", "hixi"), "ひゅ": ("hyu", "hixyu"), "ひぇ": ("hye", "hixe"), "ひょ": ("hyo", "hixyo"),
    "びゃ": ("bya", "bixya"), "びぃ": ("byi", "bixi"), "びゅ": ("byu", "bixyu"), "びぇ": ("bye", "bixe"), "びょ": ("byo", "bixyo"),
    "ぴゃ": ("pya", "pixya"), "ぴぃ": ("pyi", "pixi"), "ぴゅ": ("pyu", "pixyu"), "ぴぇ": ("pye", "pixe"), "ぴょ": ("pyo", "pixyo"),
    "みゃ": ("mya", "mixya"), "みぃ": ("myi", "mixi"), "みゅ": ("myu", "mixyu"), "みぇ": ("mye", "mixe"), "みょ": ("myo", "mixyo"),
    "りゃ": ("rya", "rixya"), "りぃ": ("ryi", "rixi"), "りゅ": ("ryu", "rixyu"), "りぇ": ("rye", "rixe"), "りょ": ("ryo", "rixyo"),

    # 小さい ぁ ぃ ぅ ぇ ぉ (ふぁ など)
    "ふぁ": ("fa", "fuxa"), "ふぃ": ("fi", "fuxi"), "ふぇ": ("fe", "fuxe"), "ふぉ": ("fo", "fuxo"),
    "ふゃ": ("fya", "fuxya"), "ふゅ": ("fyu", "fuxyu"), "ふょ": ("fyo", "fuxyo"),
    "うぁ": ("wha", "uxa"), "うぃ": ("wi", "whi", "uxi"), "うぇ": ("we", "whe", "uxe"), "うぉ": ("who", "uxo"),
    "ゔぁ": ("va", "vuxa"), "ゔぃ": ("vi", "vuxi"), "ゔぇ": ("ve", "vuxe"), "ゔぉ": ("vo", "vuxo"),
    "てぃ": ("thi", "texi"), "てゅ": ("thu", "texyu"), "でぃ": ("dhi", "dexi"), "でゅ": ("dhu", "dexyu"),
    "とぅ": ("twu", "toxu"), "どぅ": ("dwu", "doxu"),
    "つぁ": ("tsa", "tsuxa"), "つぃ": ("tsi", "tsuxi"), "つぇ": ("tse", "tsuxe"), "つぉ": ("tso", "tsuxo"),
    "くぁ": ("qa", "kwa", "kuxa"), "ぐぁ": ("gwa", "guxa"),
    "いぇ": ("ye", "ixe"),
}

MONOGRAPHS = MappingProxyType(_MONOGRAPHS)
DIGRAPHS = MappingProxyType(_DIGRAPHS)


def is_known(unit):
    """unit (1文字 or 2文字) が表に載っているかどうか"""
    return unit in MONOGRAPHS or unit in DIGRAPHS
