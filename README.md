# booruprompt

This package has a small set of fuzzy string-matching scorers. It also has
readers that pull image-generation prompts out of text files and out of PNG,
JPEG and WebP metadata. It uses only the standard library.

## Installation

```
pip install booruprompt
```

## String scorers

Every scorer takes two sequences, usually strings. Most scorers also take an
optional `score_cutoff`:

- A similarity below the cutoff is returned as `0`.
- A distance above the cutoff is returned as `score_cutoff + 1`.
- A normalized distance above the cutoff is returned as `1.0`.

```python
from booruprompt.editdistance import (
    indel_distance, indel_normalized_similarity, lcs_seq_similarity,
    damerau_levenshtein_distance, CachedIndel,
)
from booruprompt.jaro import jaro_similarity, jaro_distance, CachedJaro
from booruprompt.affix import prefix_similarity, postfix_similarity

indel_distance("aaaa", "aaab")                 # 2 (one deletion, one insertion)
lcs_seq_similarity("aaaa", "aaab")             # 3
damerau_levenshtein_distance("ab", "ba")       # 1 (one transposition)
jaro_similarity("0", "00")                     # 0.8333...
prefix_similarity("long_hair", "long_sleeves") # 5
postfix_similarity("long_hair", "short_hair")  # 5

scorer = CachedIndel("long_hair")              # reuse one side for many queries
scorer.normalized_similarity("long_hairs")
CachedJaro("martha").similarity("marhta")
```

These modules provide the scorers:

- `booruprompt.editdistance`: the `indel_*` family and `CachedIndel`, which
  count insertions and deletions. It also has `lcs_seq_similarity` and the
  `damerau_levenshtein_*` family, which allows adjacent transpositions.
- `booruprompt.jaro`: the `jaro_*` family and `CachedJaro`.
- `booruprompt.jaro_flags`: the building blocks of the Jaro score. These are
  the window bound, the length and common-character filters, character
  flagging (`FlaggedChars`) and transposition counting.
- `booruprompt.affix`: the `prefix_*` and `postfix_*` families. Each scores
  the length of the common start or end of the two inputs.
- `booruprompt.sequences`: helpers used by the scorers:
  - `is_space` tests for a Unicode word separator.
  - `sorted_split` returns the sorted words of a text.
  - `set_decomposition` returns the differences and intersection of two word
    lists.
  - `common_prefix_length`, `common_suffix_length` and `remove_common_affix`
    handle the common start and end of two sequences.

## Prompts from files

```python
from booruprompt.imageinfo import read_file_info

prompt = read_file_info("image.png")
```

`read_file_info` chooses a reader by the file extension:

- `.txt`: the whole text.
- `.png`: the first line of the `parameters` text chunk. If the image has a
  `fooocus_scheme` chunk set to `fooocus`, it returns the `full_prompt` value
  from the JSON parameters instead.
- `.jpg` / `.jpeg`: the Exif APP1 segment.
- `.webp`: the `EXIF` chunk.

For JPEG and WebP, the prompt is the line after an `a1111` marker, or else
the first line of a UTF-16 `UNICODE` user comment.

If the file is missing or has no prompt, the result is an empty string. The
result is also an empty string for any other extension. The single readers
(`read_png_info`, `read_jpeg_info`, `read_webp_info`, `read_text_file`,
`read_png_text_chunks`, `read_exif_chunk`) can also be called on their own.

## What this package does not do

The package has no tag dictionary and no suggestion engine. It does not
include the percentage ratio scorers, either the plain ones or the
token-based ones. It has no graphical editor, no clipboard handling and no
command-line program. It is a library of scorers and metadata readers.

## Running the tests

```
pip install booruprompt[test]
pytest
```