"""Dagger CI module for the greeting service.

Runs the unit and end-to-end suites in containers and starts the service
itself as a Dagger service so the end-to-end tests hit a live listener.
"""

import asyncio

import dagger as dg
from dagger import dag, function, object_type

SERVICE_PORT = 8000


@object_type
class GreetingCi:
    """Containerized test pipeline for the greeting service, built on uv."""

    @function
    def test_container(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> dg.Container:
        """Create a base container with uv and the project source.

        Args:
            source: Directory containing the project
            python_version: Python version to use (default: 3.12)

        Returns:
            Container with the source mounted at /app
        """
        uv_cache = dag.cache_volume("uv")

        return (
            dag.container()
            .from_(f"ghcr.io/astral-sh/uv:python{python_version}-bookworm-slim")
            .with_mounted_cache("/root/.cache/uv", uv_cache)
            .with_directory("/app", source)
            .with_workdir("/app")
            .with_env_variable("UV_SYSTEM_PYTHON", "1")
        )

    @function
    async def unit_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run the unit tests with pytest."""
        return await self.run_test(source, "tests/unit", python_version)

    @function
    async def unit_test_matrix(
        self, source: dg.Directory, versions: str = "3.10,3.11,3.12"
    ) -> str:
        """Run the unit tests concurrently on several Python versions.

        Args:
            source: Directory containing the project
            versions: Comma-separated list of Python versions

        Returns:
            One PASSED/FAILED section per version
        """
        version_list = [v.strip() for v in versions.split(",") if v.strip()]

        async def test_version(version: str) -> str:
            try:
                result = await self.unit_test(source, version)
            except dg.ExecError as e:
                return f"Python {version}: FAILED\n{e.stdout}{e.stderr}"
            return f"Python {version}: PASSED\n{result}"

        results = await asyncio.gather(*[test_version(v) for v in version_list])

        output_lines = ["=== MULTI-VERSION TEST RESULTS ===", ""]
        for result in results:
            output_lines.extend([result, "=" * 50, ""])

        return "\n".join(output_lines)

    @function
    async def run_test(
        self, source: dg.Directory, path: str, python_version: str = "3.12"
    ) -> str:
        """Run pytest at a specific path.

        Args:
            source: Directory containing the project
            path: Test file or directory
            python_version: Python version to use

        Returns:
            pytest output
        """
        return await (
            self.test_container(source, python_version)
            .with_exec(["uv", "pip", "install", "-e", ".[test]"])
            .with_exec(["pytest", path, "-v", "--tb=short"])
            .stdout()
        )

    @function
    def api_service(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> dg.Service:
        """Start the greeting service as a Dagger service on port 8000.

        Other functions bind it under a hostname alias to reach the
        listener from a second container.
        """
        return (
            self.test_container(source, python_version)
            .with_exec(["uv", "pip", "install", "-e", "."])
            .with_exposed_port(SERVICE_PORT)
            .as_service(args=["python", "-m", "greeting_service"])
        )

    @function
    async def test_api_service(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Probe the running service with curl.

        Requests the root path and an undefined path and reports the
        status line and body of each.
        """
        api_svc = self.api_service(source, python_version)

        test_client = (
            dag.container()
            .from_("alpine:latest")
            .with_exec(["apk", "add", "--no-cache", "curl"])
            .with_service_binding("api", api_svc)
        )

        curl = ["curl", "-s", "-w", "\nHTTP %{http_code}\n"]
        root_response = await test_client.with_exec(
            [*curl, f"http://api:{SERVICE_PORT}/"]
        ).stdout()
        missing_response = await test_client.with_exec(
            [*curl, f"http://api:{SERVICE_PORT}/nonexistent"]
        ).stdout()

        result_lines = [
            "=== API SERVICE TEST RESULTS ===",
            "",
            "Root Endpoint (GET /):",
            root_response,
            "Undefined Path (GET /nonexistent):",
            missing_response,
        ]

        return "\n".join(result_lines)

    @function
    async def integration_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run the end-to-end tests against a live service.

        Args:
            source: Directory containing the project
            python_version: Python version to use

        Returns:
            pytest output for tests/e2e
        """
        api_svc = self.api_service(source, python_version)

        return await (
            self.test_container(source, python_version)
            .with_service_binding("api", api_svc)
            .with_env_variable("API_BASE_URL", f"http://api:{SERVICE_PORT}")
            .with_exec(["uv", "pip", "install", "-e", ".[test]"])
            .with_exec(["pytest", "tests/e2e", "-v", "--tb=short"])
            .stdout()
        )
