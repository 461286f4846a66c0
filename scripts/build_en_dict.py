#!/usr/bin/env python3
"""
Builds an English word list for textspell from SCOWL (plus optional fallback).

Unlike a plain lowercase list, spellings keep their case by default: proper
names stay capitalized ("Paris") and acronyms stay upper case ("NASA"), so
textspell's capitalization rule can insist on them. Lowercase entries
still accept any capitalization of the word.

Output: dictionary/en_words.txt (one word per line, sorted by folded key)

Usage examples:
    python build_en_dict.py --target 120000 --dialects us
    python build_en_dict.py --dialects gb --no-names --fold
    python build_en_dict.py --allow-punct --include-contractions

Notes:
- Requires internet access to download the source lists.
- Sources:
  * SCOWL 2020.12.07 (Kevin Atkinson): https://sourceforge.net/projects/wordlist/files/SCOWL/2020.12.07/
  * (fallback) dwyl/english-words (Unlicense): words_alpha.txt
"""

from __future__ import annotations
import argparse
import io
import re
import sys
import unicodedata
import zipfile
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

import requests

from textspell.utils.text_utils import fold

SCOWL_ZIP_URL = "https://sourceforge.net/projects/wordlist/files/SCOWL/2020.12.07/scowl-2020.12.07.zip/download"
DWYL_WORDS_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"

BASE_SIZES = [10, 20, 35, 40, 50, 55, 60, 70]
EXTRA_SIZES = [80]
DEFAULT_TARGET = 200_000

DIALECTS = {
    "us": ["english", "american"],
    "gb": ["english", "british", "british_z"],
    "both": ["english", "american", "british", "british_z"],
}

SUBCATS_BASE = ["words", "abbreviations"]
SUBCATS_OPTIONAL = {
    "names": "proper-names",
    "contractions": "contractions",
}

ALPHA_ONLY_RE = re.compile(r"^[A-Za-z]+$")
# letters with inner apostrophes or hyphens: don't, co-op, Eiffel-Tower
WORD_PUNCT_RE = re.compile(r"^[A-Za-z]+(?:['-][A-Za-z]+)*$")


def download(url: str, timeout: int = 60) -> bytes:
    headers = {"User-Agent": "textspell-DictBuilder/1.0"}
    with requests.get(url, headers=headers, timeout=timeout, allow_redirects=True, stream=True) as r:
        r.raise_for_status()
        return r.content


def strip_diacritics(s: str) -> str:
    nfkd = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in nfkd if not unicodedata.combining(ch))


def normalize_token(token: str, keep_case: bool = True, diacritics: str = "strip",
                    allow_punct: bool = False) -> Optional[str]:
    """Return the spelling to write for a source token, or None to drop it."""
    t = token.strip()
    if not t:
        return None
    if diacritics == "strip":
        t = strip_diacritics(t)
    if not keep_case:
        t = fold(t)
    pattern = WORD_PUNCT_RE if allow_punct else ALPHA_ONLY_RE
    if not pattern.match(t):
        return None
    # single letters other than a/I are nearly always noise
    if len(t) == 1 and fold(t) not in {"a", "i"}:
        return None
    return t


def normalize_iter(tokens: Iterable[str], **options) -> Iterable[str]:
    for t in tokens:
        nt = normalize_token(t, **options)
        if nt:
            yield nt


def parse_scowl_name(base_name: str) -> Optional[Tuple[str, str, int]]:
    """Split 'english-words.70' into ('english', 'words', 70)."""
    try:
        cat, rest = base_name.split("-", 1)
        subcat, size_str = rest.rsplit(".", 1)
        return cat, subcat, int(size_str)
    except ValueError:
        return None


def collect_from_scowl(zdata: bytes,
                       dialects: List[str],
                       include_names: bool,
                       include_contractions: bool,
                       target: int,
                       **options) -> Tuple[Set[str], List[str]]:
    """Parse the SCOWL zip and collect spellings. Returns (words, files used)."""
    used: List[str] = []
    words: Set[str] = set()

    chosen_subcats = set(SUBCATS_BASE)
    if include_names:
        chosen_subcats.add(SUBCATS_OPTIONAL["names"])
    if include_contractions:
        chosen_subcats.add(SUBCATS_OPTIONAL["contractions"])
        options.setdefault("allow_punct", True)

    chosen_cats = set()
    for d in dialects:
        chosen_cats.update(DIALECTS[d])

    with zipfile.ZipFile(io.BytesIO(zdata)) as zf:
        final_files = sorted(n for n in zf.namelist() if "/final/" in n and not n.endswith("/"))

        def parse_one(path: str) -> Iterable[str]:
            # SCOWL lists are ISO-8859-1
            text = zf.read(path).decode("latin-1", errors="ignore")
            for line in text.splitlines():
                if line and not line.startswith("#"):
                    yield line

        def selected(sizes, subcats):
            for path in final_files:
                parsed = parse_scowl_name(path.split("/")[-1])
                if parsed is None:
                    continue
                cat, subcat, size = parsed
                if cat in chosen_cats and subcat in subcats and size in sizes:
                    yield path

        for path in selected(BASE_SIZES, chosen_subcats):
            used.append(path.split("/")[-1])
            words.update(normalize_iter(parse_one(path), **options))

        # top up from the larger "words" lists only
        for path in selected(EXTRA_SIZES, {"words"}):
            if len(words) >= target:
                break
            used.append(path.split("/")[-1])
            for tok in normalize_iter(parse_one(path), **options):
                if len(words) >= target:
                    break
                words.add(tok)

    return words, used


def topup_from_dwyl(existing: Set[str], target: int, **options) -> Tuple[Set[str], int]:
    """Add words from the DWYL list while still below target. Returns (set, added_count)."""
    try:
        raw = download(DWYL_WORDS_URL)
    except requests.RequestException as e:
        print(f"[warn] Could not download DWYL list: {e}", file=sys.stderr)
        return existing, 0
    folded = {fold(w) for w in existing}
    added = 0
    for line in raw.decode("utf-8", errors="ignore").splitlines():
        if len(existing) >= target:
            break
        nt = normalize_token(line, **options)
        # DWYL is all lowercase; don't shadow a capitalized SCOWL spelling
        if nt and fold(nt) not in folded:
            existing.add(nt)
            folded.add(fold(nt))
            added += 1
    return existing, added


def sort_words(words: Iterable[str]) -> List[str]:
    """Order spellings the way textspell's Dictionary stores them."""
    return sorted(words, key=lambda w: (fold(w), w))


def write_words(words: List[str], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8", newline="\n") as f:
        for w in words:
            f.write(w + "\n")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Build a case-preserving English word list for textspell (SCOWL-based).")
    ap.add_argument("--target", type=int, default=DEFAULT_TARGET, help="Approximate target size (default: 200000)")
    ap.add_argument("--dialects", nargs="+", choices=list(DIALECTS.keys()), default=["both"],
                    help="Dialects to include (us, gb, both). Default: both")
    ap.add_argument("--include-names", dest="names", action="store_true", default=True, help="Include proper names (default)")
    ap.add_argument("--no-names", dest="names", action="store_false", help="Exclude proper names")
    ap.add_argument("--include-contractions", dest="contractions", action="store_true", default=False,
                    help="Include contractions like don't, it's")
    ap.add_argument("--fold", dest="keep_case", action="store_false", default=True,
                    help="Lowercase every word instead of keeping SCOWL's capitalization")
    ap.add_argument("--allow-punct", action="store_true", default=False,
                    help="Keep words with inner apostrophes or hyphens")
    ap.add_argument("--diacritics", choices=["strip", "keep"], default="strip", help="Handle accents (default: strip)")
    ap.add_argument("--no-dwyl", dest="dwyl", action="store_false", default=True,
                    help="Do not top up from the DWYL list")
    ap.add_argument("--output", type=str, default="dictionary/en_words.txt", help="Output path")
    args = ap.parse_args(argv)

    options = {"keep_case": args.keep_case, "diacritics": args.diacritics}
    if args.allow_punct:
        options["allow_punct"] = True

    print("[1/3] Downloading SCOWL zip ...")
    zdata = download(SCOWL_ZIP_URL)

    print("[2/3] Collecting words from SCOWL ...")
    words, used_files = collect_from_scowl(
        zdata=zdata,
        dialects=args.dialects,
        include_names=args.names,
        include_contractions=args.contractions,
        target=args.target,
        **options,
    )
    print(f"    Included SCOWL files: {len(used_files)}")
    print(f"    Collected {len(words):,} spellings from SCOWL.")

    if args.dwyl and len(words) < args.target:
        print(f"[2b] Topping up from DWYL list to reach ~{args.target:,} ...")
        words, added = topup_from_dwyl(words, args.target, **options)
        print(f"    Added {added:,} words from DWYL. New total: {len(words):,}")

    print("[3/3] Writing output ...")
    final = sort_words(words)
    out_path = Path(args.output)
    write_words(final, out_path)
    print(f"Done. Wrote {len(final):,} words to {out_path}")


if __name__ == "__main__":
    main()
