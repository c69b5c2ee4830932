# pipex

`pipex` runs a chain of commands the way a shell pipeline does. It reads
from an input file, or from a here-document, and writes to an output file.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

With an input file, the command

```
pipex infile "cmd1 args" "cmd2 args" ... "cmdN args" outfile
```

behaves like the shell pipeline

```
< infile cmd1 args | cmd2 args | ... | cmdN args > outfile
```

Any existing content in `outfile` is replaced.

With a here-document, the command

```
pipex here_doc LIMITER "cmd1 args" "cmd2 args" ... "cmdN args" outfile
```

behaves like

```
cmd1 args << LIMITER | cmd2 args | ... | cmdN args >> outfile
```

Lines are read from standard input until a line equal to `LIMITER` is
entered or input ends. A `>` prompt is written to standard error before
each line is read. A last line without a newline is dropped. The output
is appended to `outfile`. Here-document mode is chosen whenever the first
argument begins with `here_doc`.

The output file is created with mode `0777`, subject to the umask.

### Command lookup

- A command's words are split on spaces. Quoting is not interpreted.
- If a command starts with `/` or `.`, it is taken as a path and run
  directly.
- Otherwise the first executable match in the directories of `PATH` is
  used.
- If `PATH` is missing from the environment, or a command cannot be
  found, an error is written to standard error and that command is not
  run. The commands after it read an empty input.

### Arguments and exit status

- With an input file, at least two commands are needed.
- In `here_doc` mode, at least two commands are needed after the limiter.
- If too few arguments are given, a usage line is written to standard
  error and the exit status is 1. Otherwise the exit status is 0,
  whatever the commands themselves return.

## Library use

The tool's parts can be used directly:

- `pipex.paths`: `get_path`, `create_paths`, `complete_path` and
  `get_correct_path` for `PATH` lookup; `PathLookupError` when it fails.
- `pipex.heredoc.read_heredoc(limiter, stream=None, prompt=None)` collects
  here-document input and returns it as bytes.
- `pipex.pipeline.resolve_command(cmd, paths)` returns the program to run
  and its argument list.
- `pipex.pipeline.Pipeline(commands, outfile, infile=None, heredoc=None,
  env=None, stderr=None)` runs a chain; `Pipeline.run()` returns one exit
  status per command (1 when `PATH` or the program was not found, 100 when
  a file could not be opened or the program could not be started).
- `pipex.cli.parse_args(argv, env=None, stdin=None)` builds a `Pipeline`
  from command-line arguments; `pipex.cli.main(argv=None, env=None)` runs it.

```python
from pipex.pipeline import Pipeline

statuses = Pipeline(["cat", "wc -l"], "out.txt", infile="in.txt").run()
```

The `pipex.libft` sub-package holds small helpers the tool is built on:

- `chars`: ASCII character tests and case conversion
- `convert`: `atoi`, `atol`, and decimal and hexadecimal formatting
- `text`: searching, comparing and bounded copying of strings
- `words`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`
- `lists`: a singly linked list (`Node`, `LinkedList`)
- `reader`: a buffered line reader (`LineReader`)

## What it does not do

- It does not interpret shell syntax: no quoting, redirections,
  variables or globbing inside a command.
- The exit status of `pipex` does not reflect the commands' statuses;
  use `Pipeline.run()` to get them.
- `pipex.libft` has no raw-memory helpers and no `printf`-style output
  functions.