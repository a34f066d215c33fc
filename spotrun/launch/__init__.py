from spotrun.launch.java import JavaExecLauncher, JavaExecSpec, default_java_executable

__all__ = ["JavaExecLauncher", "JavaExecSpec", "default_java_executable"]
