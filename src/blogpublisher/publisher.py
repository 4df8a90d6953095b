import sys

from tqdm import tqdm

from blogpublisher.models import PublishConfig, PublishReport, PublishStep
from blogpublisher.tools.build import SiteBuilder
from blogpublisher.tools.git import GitPublishTool
from blogpublisher.util import logger


class Publisher:
    """
    Builds the site and publishes the output directory: build, enter the
    output directory, stage, commit, push. Stops at the first failing step.
    """

    def __init__(self, config: PublishConfig, builder=None, git_tool_factory=GitPublishTool):
        self.config = config
        self.builder = builder or SiteBuilder()
        self.git_tool_factory = git_tool_factory
        self.git_tool = None
        self.report = PublishReport()

    def run_build(self):
        self.builder.build(self.config.site_dir, self.config.build_command)

    def run_enter_output_dir(self):
        # git commands run with the output dir as cwd; our own cwd stays put
        output_path = self.config.output_path
        logger.info(f"Entering output directory {output_path}")
        self.git_tool = self.git_tool_factory(output_path)

    def run_stage(self):
        self.git_tool.stage_all()

    def run_commit(self):
        self.report.commit_output = self.git_tool.commit(self.config.message)

    def run_push(self):
        self.report.push_output = self.git_tool.push(self.config.remote, self.config.branch)

    def run(self) -> PublishReport:
        steps = list(PublishStep)
        for step in tqdm(steps, desc="publish", unit="step", file=sys.stderr, disable=not self.config.progress):
            logger.debug(f"Running step '{step.value}'")
            getattr(self, f"run_{step.value}")()
            self.report.steps.append(step)
        return self.report
