"""Plan accessor.

plan branches, plan listings, enable/disable, plan specs.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import yaml

from bamboo_client.models.plan import (
    Plan,
    PlanCreateBranchOptions,
    PlanResponse,
    SpecResponse,
)
from bamboo_client.services._common import Service, expect_ok, require

logger = logging.getLogger(__name__)


class PlanService(Service):
    """Requests against the ``plan`` resource."""

    def create_plan_branch(
        self,
        plan_key: str,
        branch_name: str,
        options: PlanCreateBranchOptions | None = None,
    ) -> bool:
        """Create a plan branch named *branch_name* for the given plan.

        When ``options.vcs_branch`` is set, the branch is bound to that VCS
        branch through the ``vcsBranch`` query parameter.
        """
        require(plan_key=plan_key, branch_name=branch_name)
        params = {}
        if options is not None and options.vcs_branch:
            params["vcsBranch"] = options.vcs_branch
        request = self.client.new_request(
            "PUT", f"plan/{plan_key}/branch/{branch_name}.json", params=params or None,
        )
        response, _ = self.client.do(request)
        expect_ok(response, "Creating plan branch")
        return True

    def number_of_plans(self) -> int:
        """Return the number of plans on the server.

        This is the collection size the server reports, not the length of
        the (single item) page that comes back with it.
        """
        request = self.client.new_request("GET", "plan.json", params={"max-results": 1})
        response, body = self.client.do(request, PlanResponse)
        expect_ok(response, "Getting the number of plans")
        if body is None or body.plans is None:
            return 0
        return body.plans.size

    def list_plans(self) -> list[Plan]:
        """Get information on all plans.

        Asks for the plan count first so the listing comes back in one page.
        """
        count = self.number_of_plans()
        request = self.client.new_request(
            "GET", "plan.json", params={"max-results": count},
        )
        response, body = self.client.do(request, PlanResponse)
        expect_ok(response, "Getting plan information")
        if body is None or body.plans is None:
            return []
        logger.debug(
            "Server reported %d plans, received %d", count, len(body.plans.plan_list),
        )
        return list(body.plans.plan_list)

    def list_plan_keys(self) -> list[str]:
        """Return the key of every plan, in listing order."""
        return [plan.key for plan in self.list_plans()]

    def list_plan_names(self) -> list[str]:
        """Return the short name of every plan, in listing order."""
        return [plan.short_name for plan in self.list_plans()]

    def plan_name_map(self) -> dict[str, str]:
        """Map plan key to short name; a repeated key keeps the last name."""
        return {plan.key: plan.short_name for plan in self.list_plans()}

    def disable_plan(self, plan_key: str) -> httpx.Response:
        """Disable a plan or plan branch.

        The response is returned whatever its status; callers inspect it.
        """
        request = self.client.new_request("DELETE", f"plan/{plan_key}/enable")
        response, _ = self.client.do(request)
        return response

    def enable_plan(self, plan_key: str) -> httpx.Response:
        """Enable a plan or plan branch. The response is not status-checked."""
        request = self.client.new_request("POST", f"plan/{plan_key}/enable")
        response, _ = self.client.do(request)
        return response

    def get_specs(self, key: str) -> str:
        """Return the YAML specification code of a plan, verbatim."""
        request = self.client.new_request(
            "GET", f"plan/{key}/specs?format=YAML", params={"max-results": 1},
        )
        response, body = self.client.do(request, SpecResponse)
        expect_ok(response, "Getting the spec of plans")
        if body is None or body.spec is None:
            return ""
        return body.spec.code

    def load_specs(self, key: str) -> list[Any]:
        """Parse the specification of a plan into its YAML documents."""
        return list(yaml.safe_load_all(self.get_specs(key)))
