from spotrun.cli._io import load_build
from spotrun.cli.exitcodes import EXIT_OK
from spotrun.core.task import MAIN_CLASS
from spotrun.launch.java import JavaExecLauncher, JavaExecSpec
from spotrun.model.resolver import DefaultTaskResolver


def show(*, build_file: str | None, task: str | None, java: str | None) -> int:
    """
    Print the command line a run would use, one token per line.

    Nothing is launched, but the selected report's directory is created and
    the launch classpath must resolve, exactly as for a real run.
    """
    build = load_build(build_file)
    spotbugs_task = DefaultTaskResolver().select(build, task)

    spec = spotbugs_task.build_spec()
    exec_spec = JavaExecSpec(
        classpath=spotbugs_task.launch_classpath(),
        main_class=MAIN_CLASS,
        args=tuple(spec.to_arguments()),
        ignore_exit_value=spec.ignore_failures,
    )

    for token in JavaExecLauncher(java_executable=java).command(exec_spec):
        print(token)

    return EXIT_OK


def list_tasks(*, build_file: str | None) -> int:
    build = load_build(build_file)
    for name in build.task_names():
        print(name)
    return EXIT_OK
