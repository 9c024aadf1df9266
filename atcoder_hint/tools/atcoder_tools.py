from atcoder_hint.tools.registry import ToolRegistry
from atcoder_hint.core.atcoder_client import Fetcher

_TASK_ARGUMENTS_SCHEMA = {
    "type": "object",
    "properties": {
        "contest_id": {
            "type": "string",
            "description": "Contest ID (e.g. 'abc335')"
        },
        "problem_id": {
            "type": "string",
            "description": "Task ID within the contest (e.g. 'abc335_a')"
        }
    },
    "required": ["contest_id", "problem_id"]
}

def create_registry(problem: Fetcher, editorial: Fetcher) -> ToolRegistry:
    """Build the frozen registry of every tool this server exposes."""
    registry = ToolRegistry()

    @registry.register(
        name="fetch_problem",
        description="Fetch the problem statement of an AtCoder task as plain text. Use this to read constraints, input/output format and samples before giving a hint.",
        input_schema=_TASK_ARGUMENTS_SCHEMA
    )
    async def fetch_problem(contest_id: str, problem_id: str) -> str:
        return await problem.fetch(contest_id, problem_id)

    @registry.register(
        name="fetch_editorial",
        description="Fetch the official editorial page of an AtCoder task as plain text. Use this only when a hint based on the problem statement is not enough.",
        input_schema=_TASK_ARGUMENTS_SCHEMA
    )
    async def fetch_editorial(contest_id: str, problem_id: str) -> str:
        return await editorial.fetch(contest_id, problem_id)

    return registry.freeze()
