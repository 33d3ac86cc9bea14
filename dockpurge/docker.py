import json
import logging

from dockpurge.monads import *
from dockpurge.shell import Shell
from dockpurge.utils import safeQuote
from dockpurge.exceptions import DockerError, UserInterruptError

logger = logging.getLogger(__name__)

DOCKER_CLIENT = "docker"

CONTAINER_LIST_FORMAT = "{{.ID}}|{{.Image}}|{{.Names}}|{{.Status}}"
CONTAINER_MOUNTS_FORMAT = "{{json .Mounts}}"


def dockerReadCommand(cmd, params="", client=DOCKER_CLIENT):
    return Shell.procCommand("%s %s %s" % (client, cmd, params)) \
        .catch(onDockerError)


def onDockerError(err):
    if isinstance(err, UserInterruptError):
        return Fail(err)
    return Fail(DockerError(
        message=err.errorLabel,
        code=err.code,
        stdout=err.stdout,
        stderr=err.stderr,
        cmd=err.cmd))


class DockerEngine(object):
    """
    Container engine reached through its command line client. Any
    docker-compatible client (docker, podman) works.
    """

    def __init__(self, client=DOCKER_CLIENT):
        self.client = client

    def read(self, cmd, params=""):
        return dockerReadCommand(cmd, params, client=self.client)

    def listContainers(self):
        params = "-a --no-trunc --format %s" % safeQuote(CONTAINER_LIST_FORMAT)
        return self.read("ps", params) \
            .bind(parseContainerList)

    def inspectMounts(self, containerId):
        params = "--format %s %s" % (safeQuote(CONTAINER_MOUNTS_FORMAT), safeQuote(containerId))
        return self.read("inspect", params) \
            .bind(parseMounts)

    def removeContainer(self, containerId, force=True):
        params = safeQuote(containerId)
        if force:
            params = "-f %s" % params
        return self.read("rm", params)

    def removeImage(self, image, force=True):
        params = safeQuote(image)
        if force:
            params = "-f %s" % params
        return self.read("rmi", params)

    def removeVolume(self, name, force=False):
        params = safeQuote(name)
        if force:
            params = "-f %s" % params
        return self.read("volume rm", params)

# ---- Parse command output


def parseContainerList(result):
    containers = []
    for line in result['stdout'].strip().splitlines():
        if not line.strip():
            continue
        parts = line.split('|', 3)
        parts += [''] * (4 - len(parts))
        containers.append({
            'id': parts[0].strip(),
            'image': parts[1].strip(),
            'name': parts[2].strip(),
            'status': parts[3].strip(),
        })
    return OK(containers)


def parseMounts(result):
    output = result['stdout'].strip()
    if not output:
        return OK([])
    try:
        mounts = json.loads(output)
    except ValueError as err:
        return Fail(DockerError(message="Unexpected inspect output: %s" % err, stdout=output))
    return OK([{'type': m.get('Type'), 'name': m.get('Name')} for m in (mounts or [])])
