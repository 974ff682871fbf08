# pipex

`pipex` runs two commands connected by a pipe. The first command reads from an
input file. Its output goes to the second command, which writes to an output
file. It does the same job as this shell line:

```sh
< file1 cmd1 | cmd2 > file2
```

## Installation

```sh
pip install .
```

## Command-line use

```sh
pipex file1 cmd1 cmd2 file2
```

Each command is passed as one argument. It is split on spaces into a program
name and its arguments. Runs of spaces do not produce empty arguments. A
command that starts with `/` is run from that path, and the path must be
executable. Any other command is looked up by its first word in the
directories listed in `PATH`.

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

The output file is opened for writing, created or truncated, with mode `0666`
less the umask. The file is opened before its command is looked up, so it is
created even when the second command cannot be found.

The two sides of the pipe start independently. If one side fails, the other
side still runs. Examples of a failure are an unreadable input file, an empty
command, a command that starts with a space, or a program that cannot be
found. Each failure is written to standard error as a red `ERROR` tag followed
by the message. For example, a program that is not on `PATH` gives
`name: command not found`. The exit status is 0 once both sides have been
dealt with.

If the number of arguments is not exactly four, `pipex` writes
`too many arguments` or `too few arguments` to standard error, followed by the
usage line `./pipex file1 cmd1 cmd2 file2`. It then exits with status 1.

## Library use

```python
from pipex.pipeline import run_pipeline

errors = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
for error in errors:
    print(error)
```

`run_pipeline(infile, first, second, outfile, environ=None)` takes its
environment from `environ`. When `environ` is not given, it uses `os.environ`.
The environment is used both to search `PATH` and as the environment of the
commands. The function waits for the processes it started. It returns the
exceptions it met, in the order they happened. `pipex.pipeline.main(argv=None)`
is the command-line entry point and returns the exit status.

`pipex.command` resolves commands:

- `parse_command(cmd)` splits a command string into its argument list. It
  raises `CommandError` for an empty command or one starting with a space.
- `search_paths(environ)` returns the `PATH` directories, or an empty list if
  `PATH` is not set.
- `find_executable(name, environ)` returns the first executable
  `<dir>/<name>`, or `None`.
- `resolve_command(cmd, environ)` returns `(path, argv)`, or raises
  `CommandError`.

`pipex.errors` defines `PipexError` and its subclasses `UsageError` and
`CommandError`. It also has `usage_message(argc)`, and `report(error, stream)`,
which writes an error message to a stream.

## Utility modules

The package also contains some small helpers:

- `pipex.chars` classifies and converts the case of ASCII characters:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
  `to_lower`. They accept an int code point or a one-character string.
- `pipex.memory` works on byte buffers: `fill`, `zero`, `copy`, `move`,
  `find_byte`, `compare` and `allocate`.
- `pipex.text` provides:
  - `length`, `find_char` and `rfind_char`.
  - `compare_n` and `find_in`.
  - `bounded_copy` and `bounded_concat`, which return the text and the full
    length.
  - `parse_int`, which works like `atoi`, and `format_int`.
- `pipex.transform` provides:
  - `split`, which drops empty pieces.
  - `join`, `substring` and `trim`.
  - `map_indexed` and `for_each_indexed`.
- `pipex.output` writes to a text stream: `put_char`, `put_str`, `put_line`
  and `put_number`.
- `pipex.linkedlist` has `Node` and `LinkedList`. `LinkedList` has the methods
  `push_front`, `push_back`, `last`, `iterate`, `map` and `clear`. It supports
  iteration and `len()`.

## What it does not do

- Only two commands are supported.
- Commands have no quoting or escaping, because the split is on spaces only.
- There is no here-document input and no appending to the output file.
- The exit status does not reflect the status of the commands.

## Running the tests

```sh
pip install ".[test]"
pytest
```