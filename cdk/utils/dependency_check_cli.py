"""Command line builder for the OWASP dependency-check CLI."""

# Standard Library
import shlex
from dataclasses import dataclass, field
from typing import List, Optional

EXECUTABLE = "dependency-check.sh"


@dataclass
class ScanProps:
    """Options of a dependency-check scan.

    Attributes:
        project_name: The name of the project being scanned.
        basedir: Base directory the scan paths are relative to.
        paths: Paths to scan.
        fail_on_cvss: Fail the build for findings with a CVSS score equal to
            or higher than this value (0 to 10).
        enable_experimental: Load the experimental analyzers.
        suppressions: Suppression XML files used to silence false positives.
        excludes: Path patterns to exclude from the scan.
        out: Report output directory.
    """

    project_name: str
    basedir: str
    paths: List[str] = field(default_factory=lambda: ["."])
    fail_on_cvss: float = 0
    enable_experimental: Optional[bool] = None
    suppressions: Optional[List[str]] = None
    excludes: Optional[List[str]] = None
    out: str = "reports"


class DependencyCheckCli:
    """Builds ``dependency-check.sh`` command lines for a build spec."""

    def __init__(self, executable: str = EXECUTABLE) -> None:
        self.executable = executable

    def version(self) -> str:
        return f"{self.executable} --version"

    def scan(self, props: ScanProps) -> str:
        """Build the scan command.

        Reports are written as HTML (uploaded to the reports bucket) and
        JUnit (published as a CodeBuild report group).

        Parameters
        ----------
        props : ScanProps
            The scan options.

        Returns
        -------
        str
            The command line.

        Raises
        ------
        ValueError
            If ``fail_on_cvss`` is outside 0 to 10.
        """
        if not 0 <= props.fail_on_cvss <= 10:
            raise ValueError(
                f"fail_on_cvss must be between 0 and 10, got {props.fail_on_cvss}"
            )

        args = [
            self.executable,
            "--project",
            props.project_name,
            "--format",
            "HTML",
            "--format",
            "JUNIT",
            "--out",
            props.out,
            "--failOnCVSS",
            f"{props.fail_on_cvss:g}",
        ]

        for path in props.paths:
            args += ["--scan", f"{props.basedir}/{path}".rstrip("/")]

        for exclude in props.excludes or []:
            args += ["--exclude", exclude]

        for suppression in props.suppressions or []:
            args += ["--suppression", suppression]

        if props.enable_experimental:
            args.append("--enableExperimental")

        return " ".join(shlex.quote(arg) for arg in args)
