import sys

import nox

# Generate a list of PyQt6 versions compatible with system installed python version
system_python_version = tuple(sys.version_info[:3])

supported_pyqt_versions = [
    pyqt
    for pyqt in ("6.4.2", "6.6.1", "6.7.1")
    # Python version requirements for PyQt6 wheels
    if (pyqt == "6.4.2" and system_python_version >= (3, 7, 0))
    or (pyqt == "6.6.1" and system_python_version >= (3, 8, 0))
    or (pyqt == "6.7.1" and system_python_version >= (3, 8, 0))
]


@nox.session
@nox.parametrize("pyqt", supported_pyqt_versions)
def run_tests(session, pyqt):
    session.install(f"PyQt6=={pyqt}")
    session.install("-e", ".[test]")

    qt_version = session.run(
        "python", "-c", "from PyQt6.QtCore import PYQT_VERSION_STR; print(PYQT_VERSION_STR)", silent=True
    ).strip()
    session.log(f"PyQt6 version: {qt_version}")
    assert qt_version == pyqt

    session.run("pytest", *session.posargs)
