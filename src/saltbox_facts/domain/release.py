"""Release pipeline guards for the published fact-collector executable.

The workflow in ``.github/workflows/release.yml`` checks out the source,
installs the toolchain, builds ``dist/saltbox-facts`` once, and then either
uploads it as the ``ansible-facts`` run artifact or attaches it to a release.
These functions are the Python statement of those guard expressions so the
decision can be evaluated (and tested) outside the CI platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .enums import ReleaseStep

TAG_REF_PREFIX = "refs/tags/"
PULL_REQUEST_EVENT = "pull_request"
ARTIFACT_NAME = "ansible-facts"
ARTIFACT_PATH = "./dist/saltbox-facts"

_BUILD_STEPS: tuple[ReleaseStep, ...] = (
    ReleaseStep.CHECKOUT,
    ReleaseStep.INSTALL_TOOLCHAIN,
    ReleaseStep.BUILD,
)


def is_tag_ref(ref: str) -> bool:
    """Return True when *ref* names a tag (``startsWith(ref, 'refs/tags/')``).

    Example:
        >>> is_tag_ref("refs/tags/v1.2.0")
        True
        >>> is_tag_ref("refs/heads/main")
        False
    """
    return ref.startswith(TAG_REF_PREFIX)


def should_upload_artifact(ref: str) -> bool:
    """Upload the build as a run artifact for every non-tag ref.

    Example:
        >>> should_upload_artifact("refs/heads/main")
        True
    """
    return not is_tag_ref(ref)


def should_publish_release(ref: str, event_name: str) -> bool:
    """Publish a release for tag refs outside pull-request events.

    Example:
        >>> should_publish_release("refs/tags/v1.0.0", "push")
        True
        >>> should_publish_release("refs/tags/v1.0.0", "pull_request")
        False
    """
    return is_tag_ref(ref) and event_name != PULL_REQUEST_EVENT


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    """Ordered steps one workflow run executes for a ref/event pair."""

    ref: str
    event_name: str
    steps: tuple[ReleaseStep, ...]
    artifact_name: str = ARTIFACT_NAME
    artifact_path: str = ARTIFACT_PATH

    @property
    def uploads_artifact(self) -> bool:
        return ReleaseStep.UPLOAD_ARTIFACT in self.steps

    @property
    def publishes_release(self) -> bool:
        return ReleaseStep.RELEASE in self.steps

    def to_document(self) -> dict[str, Any]:
        return {
            "ref": self.ref,
            "event_name": self.event_name,
            "tag": is_tag_ref(self.ref),
            "steps": [step.value for step in self.steps],
            "upload_artifact": self.uploads_artifact,
            "publish_release": self.publishes_release,
            "artifact_name": self.artifact_name,
            "artifact_path": self.artifact_path,
        }


def plan_release(ref: str, event_name: str) -> ReleasePlan:
    """Evaluate both publish guards and return the resulting step sequence.

    The build step is always present exactly once and precedes any publish
    step. A tag ref raised by a pull-request event publishes nothing.

    Example:
        >>> [s.value for s in plan_release("refs/heads/main", "push").steps]
        ['checkout', 'install-toolchain', 'build', 'upload-artifact']
        >>> [s.value for s in plan_release("refs/tags/v2", "push").steps]
        ['checkout', 'install-toolchain', 'build', 'release']
        >>> plan_release("refs/tags/v2", "pull_request").publishes_release
        False
    """
    steps = list(_BUILD_STEPS)
    if should_upload_artifact(ref):
        steps.append(ReleaseStep.UPLOAD_ARTIFACT)
    if should_publish_release(ref, event_name):
        steps.append(ReleaseStep.RELEASE)
    return ReleasePlan(ref=ref, event_name=event_name, steps=tuple(steps))


__all__ = [
    "ARTIFACT_NAME",
    "ARTIFACT_PATH",
    "PULL_REQUEST_EVENT",
    "TAG_REF_PREFIX",
    "ReleasePlan",
    "is_tag_ref",
    "plan_release",
    "should_publish_release",
    "should_upload_artifact",
]
