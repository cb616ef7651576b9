# Standard Library
from typing import List, Optional

# Third Party
from aws_cdk import (
    aws_codebuild as codebuild,
    aws_codecommit as codecommit,
    aws_events as events,
    aws_events_targets as targets,
    aws_iam as iam,
    aws_s3 as s3,
)
from constructs import Construct

# Local Modules
from cdk.custom_constructs.codecommit_backup import CODECOMMIT_READ_ACTIONS
from cdk.utils import ScanProps, dependency_check_build_spec


class CodeCommitDependencyCheck(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        repository: codecommit.IRepository,
        schedule: events.Schedule,
        compute_type: Optional[codebuild.ComputeType] = None,
        pre_check_command: Optional[str] = 'echo "No preCheckCommand!"',
        version: Optional[str] = "5.3.2",
        project_name: Optional[str] = None,
        fail_on_cvss: Optional[float] = 0,
        paths: Optional[List[str]] = None,
        excludes: Optional[List[str]] = None,
        suppressions: Optional[List[str]] = None,
        enable_experimental: Optional[bool] = False,
        reports_bucket: Optional[s3.IBucket] = None,
        gpg_key_id: Optional[str] = None,
    ) -> None:
        """Scheduled OWASP dependency-check scan of a CodeCommit repository.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        repository : codecommit.IRepository
            The repository to be checked.
        schedule : events.Schedule
            Schedule for the dependency check.
        compute_type : Optional[codebuild.ComputeType], optional
            The type of compute used for the check, by default the build
            image's default compute type
        pre_check_command : Optional[str], optional
            Custom command executed in the clone before the check, by
            default `echo "No preCheckCommand!"`
        version : Optional[str], optional
            Version of dependency-check, by default "5.3.2"
        project_name : Optional[str], optional
            The name of the project being scanned, by default the
            repository name
        fail_on_cvss : Optional[float], optional
            Fail the build when a vulnerability with a CVSS score equal to
            or higher than this value is found, by default 0
        paths : Optional[List[str]], optional
            The paths to scan, relative to the clone, by default ["."]
        excludes : Optional[List[str]], optional
            The path patterns to exclude from the scan, by default None
        suppressions : Optional[List[str]], optional
            Suppression XML files used to suppress false positives, by
            default None
        enable_experimental : Optional[bool], optional
            Enable the experimental analyzers, by default False
        reports_bucket : Optional[s3.IBucket], optional
            Bucket for uploading HTML reports, by default None
        gpg_key_id : Optional[str], optional
            Release signing key id used to verify the download, by default
            None (no verification)
        """
        super().__init__(scope, id)

        repository_name = repository.repository_name

        build_image = codebuild.LinuxBuildImage.STANDARD_7_0

        self.check_project = codebuild.Project(
            self,
            "CheckProject",
            cache=codebuild.Cache.local(codebuild.LocalCacheMode.CUSTOM),
            environment=codebuild.BuildEnvironment(
                build_image=build_image,
                compute_type=compute_type or build_image.default_compute_type,
            ),
            build_spec=codebuild.BuildSpec.from_object(
                dependency_check_build_spec(
                    repository_name=repository_name,
                    clone_url=repository.repository_clone_url_http,
                    scan=ScanProps(
                        project_name=project_name or repository_name,
                        basedir=repository_name,
                        paths=paths or ["."],
                        fail_on_cvss=fail_on_cvss,
                        enable_experimental=enable_experimental,
                        suppressions=suppressions,
                        excludes=excludes,
                    ),
                    version=version,
                    pre_check_command=pre_check_command,
                    reports_bucket_name=(
                        reports_bucket.bucket_name if reports_bucket else None
                    ),
                    gpg_key_id=gpg_key_id,
                )
            ),
        )

        self.check_project.add_to_role_policy(
            iam.PolicyStatement(
                resources=[repository.repository_arn],
                actions=CODECOMMIT_READ_ACTIONS,
            )
        )

        if reports_bucket:
            reports_bucket.grant_write(self.check_project)

        events.Rule(
            self,
            "ScheduleRule",
            schedule=schedule,
            targets=[targets.CodeBuildProject(self.check_project)],
        )

    def on_check_failed(self, id: str, **kwargs) -> events.Rule:
        """Defines an event rule which triggers when a check fails."""
        return self.check_project.on_build_failed(id, **kwargs)

    def on_check_started(self, id: str, **kwargs) -> events.Rule:
        """Defines an event rule which triggers when a check starts."""
        return self.check_project.on_build_started(id, **kwargs)

    def on_check_succeeded(self, id: str, **kwargs) -> events.Rule:
        """Defines an event rule which triggers when a check completes."""
        return self.check_project.on_build_succeeded(id, **kwargs)
