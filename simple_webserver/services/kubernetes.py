"""
Kubernetes pod creation used by /kubecreate
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

import urllib3
from kubernetes import client as k8s_client, config as k8s_konfig
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException

logger = logging.getLogger(__name__)


class PodCreationError(Exception):
    """The cluster could not be reached or refused to create the pod"""


class PodLauncher(ABC):
    @abstractmethod
    def create_pod(self) -> str:
        """Create one pod and return a textual description of the result."""


class KubernetesPodLauncher(PodLauncher):
    """
    Creates a single-container pod through the Kubernetes API.

    In-cluster configuration is tried first, then the local kubeconfig.
    The API client is built on first use so the server can start without
    cluster access.
    """

    def __init__(self, namespace: str = "default", image: str = "nginx:alpine",
                 name_prefix: str = "simple-webserver-"):
        self.namespace = namespace
        self.image = image
        self.name_prefix = name_prefix
        self._v1: Optional[k8s_client.CoreV1Api] = None
        self._lock = threading.Lock()

    def _core_api(self) -> k8s_client.CoreV1Api:
        with self._lock:
            if self._v1 is None:
                try:
                    k8s_konfig.load_incluster_config()
                except ConfigException:
                    k8s_konfig.load_kube_config()
                self._v1 = k8s_client.CoreV1Api()
                logger.info("✅ Kubernetes client initialized")
            return self._v1

    def build_pod(self) -> k8s_client.V1Pod:
        return k8s_client.V1Pod(
            metadata=k8s_client.V1ObjectMeta(
                generate_name=self.name_prefix,
                labels={"app.kubernetes.io/created-by": "simple-webserver"},
            ),
            spec=k8s_client.V1PodSpec(
                restart_policy="Never",
                containers=[
                    k8s_client.V1Container(name="main", image=self.image),
                ],
            ),
        )

    def create_pod(self) -> str:
        try:
            v1 = self._core_api()
            pod = v1.create_namespaced_pod(namespace=self.namespace, body=self.build_pod())
        except ApiException as e:
            raise PodCreationError(f"kubernetes API error ({e.status}): {e.reason}") from e
        except ConfigException as e:
            raise PodCreationError(f"kubernetes configuration unavailable: {e}") from e
        except urllib3.exceptions.HTTPError as e:
            raise PodCreationError(f"kubernetes API unreachable: {e}") from e

        name = pod.metadata.name
        logger.info(f"Created pod {self.namespace}/{name}")
        return name
