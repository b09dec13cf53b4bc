# dir2prompt

`dir2prompt` scans a directory, picks out text files using include and exclude
glob patterns, and writes their contents into one output stream or file. The
output opens with a tree of the included files, and each file's contents follow
under a header naming its path. The result is a single document that is easy to
paste into a prompt or to read through in one go.

Hidden directories and files (names starting with `.`), including `.git` and
`.gitignore`, are always skipped. Files that look binary are left out with a
warning on standard error.

## Installation

```
pip install .
```

## Usage

```
dir2prompt --dir PATH [--include-files PATTERNS] [--exclude-files PATTERNS]
           [-o OUTPUT] [--estimate-tokens]
```

Options:

- `--dir` — root directory to scan (required).
- `--include-files` — comma-separated glob patterns of files to include. When
  left out, every file is included.
- `--exclude-files` — comma-separated glob patterns of files to exclude.
  Exclusion wins over inclusion.
- `-o`, `--output` — output file path, or `-` for standard output (the default).
- `--estimate-tokens` — print an estimate of the number of tokens in the output
  to standard error.

The command exits with status 0 on success and 1 on an error (a missing
`--dir`, an invalid pattern, an unreadable directory or file). If no matching
text files are found, a note is printed on standard error and nothing is
written.

### Patterns

Patterns are matched against the whole path relative to `--dir`. `*` matches
any run of characters, path separators included, so `*.go` matches both
`main.go` and `src/lib.go`. Also supported: `?` for one character, `[abc]`,
`[a-z]` and `[!abc]` character classes, `{a,b}` alternatives, and backslash
escapes.

### Binary detection

Files with the extensions `.go`, `.js`, `.ts`, `.py`, `.txt`, `.md`, `.html`,
`.css`, `.json`, `.xml`, `.yaml`, `.yml` and `.toml` are always treated as text.
Any other file is checked by its first 512 bytes: a NUL byte, or more than 30%
control bytes, marks it as binary.

### Examples

Collect all Markdown files:

```
dir2prompt --dir ./project --include-files "*.md"
```

Collect Go and Markdown sources but leave out the `docs` directory, writing to
a file:

```
dir2prompt --dir ./project --include-files "*.go,*.md" --exclude-files "docs/*" -o context.txt
```

Everything except temporary and binary artefacts, with a token estimate:

```
dir2prompt --dir ./project --exclude-files "*.bin,*.tmp" --estimate-tokens
```

## Output format

The tree lists directories before files, each group by name. File contents
follow in sorted path order.

```
Directory Structure:

└── ./
    ├── docs
    │   └── guide.md
    └── README.md

---
File: README.md
---

<contents of README.md>

---
File: docs/guide.md
---

<contents of docs/guide.md>
```

## Using it from Python

```python
from dir2prompt.processor import Config, Processor

config = Config(dir_path="project", include_files=["*.py"], exclude_files=["*_test.py"])
Processor(config).process()
```

Other pieces that can be used on their own:

- `dir2prompt.processor.generate_directory_structure(files)` renders the tree
  for a list of relative paths.
- `dir2prompt.processor.is_text_file(path)` applies the binary check above.
- `Processor.collect_files()` returns the matching text files without writing
  anything.
- `dir2prompt.matching.GlobPattern(pattern).match(text)` tests a path against a
  pattern; a bad pattern raises `dir2prompt.matching.PatternError`.
- `dir2prompt.tokens.estimate_tokens(text)` gives the token estimate for a
  piece of text, and `split_tokens(text)` the pieces it counts.

Errors during processing are raised as `dir2prompt.processor.ProcessorError`.

## Limitations

The token count is an estimate only. No model vocabulary is loaded: the text is
split into word-like pieces (words, runs of up to three digits, punctuation and
whitespace) in the way GPT-style tokenizers pre-split text, and the pieces are
counted. Real tokenizers often split long or rare words further, so the true
count is usually somewhat higher.