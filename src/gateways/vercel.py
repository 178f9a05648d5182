from typing import Any, Dict, List, Optional

import httpx

from src.config.config import VercelConfig
from src.utils.constants import VercelConst
from src.utils.decorators import try_except_decorator
from src.utils.exceptions import CollaboratorError


class VercelGateway:
    def __init__(self, config: Optional[VercelConfig] = None) -> None:
        self.config = config or VercelConfig.from_env()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.token}",
            "Content-Type": "application/json",
        }

    def _params(self) -> Dict[str, str]:
        return {"teamId": self.config.team_id} if self.config.team_id else {}

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = httpx.post(
            f"{VercelConst.BASE_URL}{path}",
            headers=self._headers(),
            params=self._params(),
            json=payload,
            timeout=self.config.timeout,
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def env_entries(values: Dict[str, str]) -> List[Dict[str, Any]]:
        """Environment entries applied to every deployment target."""
        return [
            {"key": key, "value": value, "type": "encrypted", "target": list(VercelConst.ENV_TARGETS)}
            for key, value in values.items()
        ]

    @try_except_decorator("Vercel")
    def create_project(self, name: str, repo: str, env: Dict[str, str]) -> Dict[str, Any]:
        project = self._post(VercelConst.PROJECTS_PATH, {
            "name": name,
            "framework": VercelConst.FRAMEWORK,
            "gitRepository": {"type": "github", "repo": repo},
            "environmentVariables": self.env_entries(env),
        })
        if not project.get("id"):
            raise CollaboratorError("Vercel", f"project {name} created without an id")
        return project

    @try_except_decorator("Vercel")
    def create_deployment(self, project_name: str, project_id: str, repo: str, ref: str) -> Dict[str, Any]:
        org, _, repo_name = repo.partition("/")
        return self._post(VercelConst.DEPLOYMENTS_PATH, {
            "name": project_name,
            "project": project_id,
            "target": "production",
            "gitSource": {"type": "github", "org": org, "repo": repo_name, "ref": ref},
        })

    @try_except_decorator("Vercel")
    def add_domain(self, project_id: str, domain: str) -> Dict[str, Any]:
        return self._post(f"{VercelConst.PROJECTS_PATH}/{project_id}/domains", {"name": domain})
