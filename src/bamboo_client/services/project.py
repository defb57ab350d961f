"""Project accessor.

project info, expanded project plans, project listing, repositories.
"""

from __future__ import annotations

from bamboo_client.config.constants import PROJECT_PLANS_MAX_RESULT
from bamboo_client.models.plan import Plan, PlanResponse
from bamboo_client.models.project import (
    Project,
    ProjectInformation,
    ProjectRepos,
    ProjectRepositoryResult,
    ProjectResponse,
)
from bamboo_client.services._common import Service, expect_ok, require


class ProjectService(Service):
    """Requests against the ``project`` resource."""

    def project_info(self, project_key: str) -> ProjectInformation:
        """Get the information on a specific project."""
        require(project_key=project_key)
        request = self.client.new_request("GET", f"project/{project_key}.json")
        response, info = self.client.do(request, ProjectInformation)
        expect_ok(response, "Getting Project Information")
        return info or ProjectInformation()

    def project_plans(self, project_key: str) -> list[Plan]:
        """Return the plans of a project, in server order."""
        require(project_key=project_key)
        request = self.client.new_request(
            "GET",
            f"project/{project_key}.json",
            params={"expand": "plans", "max-result": PROJECT_PLANS_MAX_RESULT},
        )
        response, body = self.client.do(request, PlanResponse)
        expect_ok(response, "Getting Project Plans")
        if body is None or body.plans is None:
            return []
        return list(body.plans.plan_list)

    def list_projects(self) -> list[Project]:
        """List all projects."""
        request = self.client.new_request("GET", "project.json")
        response, body = self.client.do(request, ProjectResponse)
        expect_ok(response, "List projects")
        if body is None or body.projects is None:
            return []
        return list(body.projects.project_list)

    def project_repositories(self, project_key: str) -> list[ProjectRepos]:
        # The key is not validated here; an empty key hits project//repositories.
        request = self.client.new_request("GET", f"project/{project_key}/repositories")
        response, body = self.client.do(request, ProjectRepositoryResult)
        expect_ok(response, "Getting Project Repositories")
        if body is None:
            return []
        return list(body.repositories)
