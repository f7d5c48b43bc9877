from pathlib import Path
import pytest

HEADER = (
    "Word,FREQcount,CDcount,FREQlow,Cdlow,SUBTLWF,Lg10WF,SUBTLCD,Lg10CD,"
    "Dom_PoS_SUBTLEX,Freq_dom_PoS_SUBTLEX,Percentage_dom_PoS,All_PoS_SUBTLEX,"
    "All_freqs_SUBTLEX,Zipf-value"
)

ROWS = """\
the,1501908,8388,1339811,8388,29449.18,6.1766,100.00,3.9237,Article,1499459,1.00,Article.Adverb.Noun,1499459.1200.74,7.468
she,157342,7639,155036,7598,3085.14,5.1968,91.07,3.8830,Pronoun,157219,1.00,Pronoun.Noun,157219.123,6.489
tie,1850,1103,1581,1004,36.27,3.2674,13.15,3.0430,Noun,1087,0.59,Noun.Verb,1087.763,4.560
cat,3020,1236,2616,1145,59.22,3.4801,14.74,3.0924,Noun,2923,0.97,Noun.Verb,2923.97,4.773
cot,103,84,95,79,2.02,2.0170,1.00,1.9294,Noun,103,1.00,Noun,103,3.305
cut,13224,4364,11893,4137,259.29,4.1214,52.03,3.6400,Verb,8993,0.68,Verb.Noun.Adjective,8993.3512.719,5.414
hat,2470,1102,2130,1012,48.43,3.3929,13.14,3.0426,Noun,2435,0.99,Noun.Verb,2435.35,4.685
fiji,27,18,20,15,0.53,1.4472,0.21,1.2788,Name,27,1.00,Name,27,2.723
fuse,237,154,206,139,4.65,2.3766,1.84,2.1903,Noun,137,0.58,Noun.Verb,137.100,3.668
fish,4978,1779,4338,1637,97.61,3.6971,21.21,3.2504,Noun,4356,0.88,Noun.Verb,4356.622,4.990
fist,288,238,260,222,5.65,2.4609,2.84,2.3784,Noun,284,0.99,Noun.Verb,284.4,3.752
frog,526,204,393,170,10.31,2.7218,2.43,2.3118,Noun,521,0.99,Noun.Verb,521.5,4.013
from,90089,8224,82768,8093,1766.45,4.9547,98.04,3.9151,Preposition,90089,1.00,Preposition,90089,6.247
ape,288,166,213,139,5.65,2.4609,1.98,2.2227,Noun,282,0.98,Noun.Verb,282.6,3.752
apes,95,60,86,53,1.86,1.9823,0.72,1.7853,Noun,95,1.00,Noun,95,3.270
tide,415,277,373,258,8.14,2.6191,3.30,2.4440,Noun,410,0.99,Noun.Verb,410.5,3.911
tile,120,93,104,85,2.35,2.0828,1.11,1.9731,Noun,82,0.68,Noun.Verb,82.38,3.371
time,114186,8300,103393,8226,2238.94,5.0576,98.95,3.9191,Noun,113878,1.00,Noun.Verb,113878.308,6.350
tame,173,146,150,132,3.39,2.2405,1.74,2.1673,Verb,92,0.53,Verb.Adjective,92.81,3.530
toxic,327,175,286,161,6.41,2.5159,2.09,2.2455,Adjective,327,1.00,Adjective,327,3.807
"""

WORDS = [line.split(",", 1)[0] for line in ROWS.splitlines()]


def row(word: str, freq: str = "1.00", lg: str = "1.0", pos: str = "Noun", zipf: str = "3.0") -> str:
    """A corpus row with only the fields the library reads filled in meaningfully."""
    return f"{word},1,1,1,1,{freq},{lg},1.00,1.0,{pos},1,1.00,{pos},1,{zipf}"


@pytest.fixture
def make_corpus(tmp_path: Path):
    """make_corpus(rows_text, name="US_2007.csv") -> directory holding the file."""
    def _make(rows: str = ROWS, name: str = "US_2007.csv", dirname: str = "norms") -> Path:
        root = tmp_path / dirname
        root.mkdir(exist_ok=True)
        (root / name).write_text(HEADER + "\n" + rows, encoding="utf-8")
        return root
    return _make


@pytest.fixture
def corpus_dir(make_corpus) -> Path:
    return make_corpus()


@pytest.fixture
def corpus_words() -> list[str]:
    return list(WORDS)


@pytest.fixture
def make_row():
    return row
