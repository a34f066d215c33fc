from spotrun.cli._io import load_build
from spotrun.cli.exitcodes import EXIT_OK
from spotrun.launch.java import JavaExecLauncher
from spotrun.model.resolver import DefaultTaskResolver


def run(*, build_file: str | None, task: str | None, java: str | None) -> int:
    build = load_build(build_file)
    spotbugs_task = DefaultTaskResolver().select(build, task)

    result = spotbugs_task.run(JavaExecLauncher(java_executable=java, cwd=build.base_dir))

    if result.report_destination is not None:
        print(f"Report: {result.report_destination}")
    if result.exit_code != 0:
        print(f"SpotBugs exited with status {result.exit_code} (ignored)")

    return EXIT_OK
