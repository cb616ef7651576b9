# Standard Library
import os
from typing import List, Optional

# Third Party
from aws_cdk import (
    aws_codebuild as codebuild,
    aws_codecommit as codecommit,
    aws_events as events,
    aws_events_targets as targets,
    aws_iam as iam,
    aws_s3 as s3,
    aws_s3_assets as s3_assets,
)
from constructs import Construct

# Local Modules
from cdk.utils import (
    SCRIPTS_BUCKET_ENV,
    SCRIPTS_BUCKET_KEY_ENV,
    full_region_backup_build_spec,
    repository_backup_build_spec,
)

SCRIPTS_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), os.pardir, "scripts"
)

# Read-only access needed to clone a repository
CODECOMMIT_READ_ACTIONS = [
    "codecommit:BatchGet*",
    "codecommit:Get*",
    "codecommit:Describe*",
    "codecommit:List*",
    "codecommit:GitPull",
]


class _ScheduledBackup(Construct):
    """Runs a backup CodeBuild project on a schedule."""

    backup_project: codebuild.Project

    def _schedule(self, schedule: events.Schedule) -> None:
        events.Rule(
            self,
            "ScheduleRule",
            schedule=schedule,
            targets=[targets.CodeBuildProject(self.backup_project)],
        )

    def on_backup_failed(self, id: str, **kwargs) -> events.Rule:
        """Defines an event rule which triggers when a backup fails."""
        return self.backup_project.on_build_failed(id, **kwargs)

    def on_backup_started(self, id: str, **kwargs) -> events.Rule:
        """Defines an event rule which triggers when a backup starts."""
        return self.backup_project.on_build_started(id, **kwargs)

    def on_backup_succeeded(self, id: str, **kwargs) -> events.Rule:
        """Defines an event rule which triggers when a backup completes."""
        return self.backup_project.on_build_succeeded(id, **kwargs)


class S3CodeCommitBackup(_ScheduledBackup):
    def __init__(
        self,
        scope: Construct,
        id: str,
        backup_bucket: s3.IBucket,
        schedule: events.Schedule,
        repository: codecommit.IRepository,
        compute_type: Optional[codebuild.ComputeType] = None,
    ) -> None:
        """Scheduled backup of one CodeCommit repository to S3.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        backup_bucket : s3.IBucket
            Bucket for storing the backups.
        schedule : events.Schedule
            Schedule for backups.
        repository : codecommit.IRepository
            Repository to be backed up.
        compute_type : Optional[codebuild.ComputeType], optional
            The type of compute used for the backup, by default the build
            image's default compute type
        """
        super().__init__(scope, id)

        build_image = codebuild.LinuxBuildImage.STANDARD_7_0

        self.backup_project = codebuild.Project(
            self,
            "BackupProject",
            environment=codebuild.BuildEnvironment(
                build_image=build_image,
                compute_type=compute_type or build_image.default_compute_type,
            ),
            build_spec=codebuild.BuildSpec.from_object(
                repository_backup_build_spec(
                    repository_name=repository.repository_name,
                    clone_url=repository.repository_clone_url_http,
                    bucket_name=backup_bucket.bucket_name,
                )
            ),
        )

        backup_bucket.grant_put(self.backup_project)

        self.backup_project.add_to_role_policy(
            iam.PolicyStatement(
                resources=[repository.repository_arn],
                actions=CODECOMMIT_READ_ACTIONS,
            )
        )

        self._schedule(schedule)


class FullRegionS3CodeCommitBackup(_ScheduledBackup):
    def __init__(
        self,
        scope: Construct,
        id: str,
        backup_bucket: s3.IBucket,
        schedule: events.Schedule,
        repository_names: Optional[List[str]] = None,
        compute_type: Optional[codebuild.ComputeType] = None,
    ) -> None:
        """Scheduled backup of the CodeCommit repositories of a region.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        backup_bucket : s3.IBucket
            Bucket for storing the backups.
        schedule : events.Schedule
            Schedule for backups.
        repository_names : Optional[List[str]], optional
            The names of the repositories to back up, by default all
            repositories in the region
        compute_type : Optional[codebuild.ComputeType], optional
            The type of compute used for the backup, by default the build
            image's default compute type
        """
        super().__init__(scope, id)

        asset = s3_assets.Asset(self, "ScriptsDirectory", path=SCRIPTS_PATH)

        build_image = codebuild.LinuxBuildImage.STANDARD_7_0

        environment_variables = {
            "BACKUP_BUCKET": codebuild.BuildEnvironmentVariable(
                value=backup_bucket.bucket_name
            ),
            SCRIPTS_BUCKET_ENV: codebuild.BuildEnvironmentVariable(
                value=asset.s3_bucket_name
            ),
            SCRIPTS_BUCKET_KEY_ENV: codebuild.BuildEnvironmentVariable(
                value=asset.s3_object_key
            ),
        }
        # Without names the script backs up every repository
        if repository_names:
            environment_variables["REPOSITORY_NAMES"] = (
                codebuild.BuildEnvironmentVariable(
                    value=" ".join(repository_names)
                )
            )

        self.backup_project = codebuild.Project(
            self,
            "FullRegionBackupProject",
            environment=codebuild.BuildEnvironment(
                build_image=build_image,
                compute_type=compute_type or build_image.default_compute_type,
            ),
            environment_variables=environment_variables,
            build_spec=codebuild.BuildSpec.from_object(
                full_region_backup_build_spec()
            ),
        )

        asset.grant_read(self.backup_project)
        backup_bucket.grant_put(self.backup_project)

        # The repositories are discovered at run time
        self.backup_project.add_to_role_policy(
            iam.PolicyStatement(
                resources=["*"],
                actions=CODECOMMIT_READ_ACTIONS,
            )
        )

        self._schedule(schedule)
