# minishell

A small interactive POSIX shell. It reads one line at a time and runs a
handful of builtins itself. It starts external commands, including `|`
pipelines. Processes stopped with Ctrl-Z are kept in a job list so that
they can be resumed later.

## Installing

```
pip install .
```

## Running

```
minishell
```

The command takes no options apart from `--help`. When output goes to
a terminal, the screen is cleared first. Before each line is read, the
shell prints a newline and then the prompt, which is `minishell$: ` by
default.

At startup the shell reads the names of the external commands it may
run from `ext_commands.txt` in the current directory. The file holds one
name per line. Both `\n` and `\r\n` line endings are accepted, and blank
lines are skipped.

If the file does not exist, no external command can be run. If the file
cannot be read because of its permissions, the shell reports the error
and exits with status 1.

Each line is looked up by its first word, cut to 19 characters. Builtin
names are checked first, then the names from `ext_commands.txt`. A
command found in neither is reported as
`cmd --> <name>   type --> NO_COMMAND` and is not run.

The shell leaves on `exit`. At end of input it returns the status of
the last command.

## What it understands

- `PS1=<text>` sets the prompt to `<text>`. There must be no space
  directly after `=`.
- `cd <dir>` changes directory and prints the working directory. If the
  change fails, it still prints the directory it is in.
- `pwd` prints the working directory.
- `echo $$` prints the shell's process id.
- `echo $?` prints the status of the last external command or `fg`.
  - A command that is stopped gives 128 plus the signal number.
  - A command killed by a signal gives 128 plus the signal number.
  - A command that cannot be started gives 1.
- `echo $SHELL` prints the `SHELL` environment variable, if it is set.
- `exit` leaves the shell with status 0.
- `jobs` lists the stopped jobs, most recently stopped first, as
  `[n][pid:<pid>]    Stopped    <command line>`.
- `fg` resumes the most recent stopped job and waits for it. If it stops
  again, it goes back to the job list.
- `bg` sends the most recent stopped job `SIGCONT` and leaves it in the
  job list.
- `cmd1 | cmd2 | ...` runs external commands connected by pipes.
  - A pipeline can have up to ten stages.
  - Each stage can have at most nineteen words.
  - Words are separated by spaces, and only the first 63 words of a line
    are used.
  - An empty stage is an error, and so is a stage with too many words.
    Either error is printed to standard error and sets the status to 1.
  - The shell decides whether the line may run by its first word only.

Any other builtin name is accepted and does nothing. This includes
`echo` with other arguments, `export`, `set` and `read`.

Press Ctrl-Z while a foreground command runs to stop it and add it to
the job list. Ctrl-C goes to the foreground command. The shell itself
keeps running.

## What it does not do

There is no quoting, no variable expansion beyond the three `echo` forms
above, no globbing, no redirection with `<` or `>`, no `&`, and no
scripting. Stopped jobs can only be resumed in last-stopped order. `fg`
and `bg` take no job number.

## Using it from Python

```python
import sys
from minishell.commands import load_external_commands
from minishell.shell import Shell

shell = Shell(load_external_commands("ext_commands.txt"), "minishell$: ", sys.stdout)
status = shell.run(sys.stdin)
```

- `Shell.handle_line(line)` processes a single line. It returns `False`
  when the line was `exit`.
- `minishell.commands.get_command` takes the first word of a line.
- `minishell.commands.check_command_type` classifies a command name as
  a `CommandType`.
- `minishell.pipeline.parse_pipeline` splits a line into its stages. It
  raises `PipelineError` for a malformed line.
- `minishell.pipeline.run_pipeline` runs the stages. It returns the last
  status and the pids of any processes that stopped.
- `minishell.jobs.JobList` holds the stopped jobs as `Job` records.
- `minishell.signals.SignalFlags` records the arrival of `SIGINT`,
  `SIGTSTP` and `SIGCHLD`.