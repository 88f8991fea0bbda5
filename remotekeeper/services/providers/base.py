"""Provider descriptor types and the helpers used by credential mappings."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Callable, Mapping, Optional

# Credential mapping: (credentials, auth_type) -> CLI argument vector
SetupFn = Callable[[Mapping[str, str], Optional[str]], list[str]]

OBSCURE_TOKEN_PREFIX = "$(rclone obscure "
OBSCURE_TOKEN_SUFFIX = ")"


@dataclass(frozen=True)
class ProviderFeatures:
    """Optional backend capabilities as reported by rclone.

    Informational only; nothing in remotekeeper gates an operation on them.
    """

    purge: bool = False
    copy: bool = False
    move: bool = False
    dir_move: bool = False
    clean_up: bool = False
    list_r: bool = False
    stream_upload: bool = False
    multithread_upload: bool = False
    link_sharing: bool = False
    about: bool = False
    empty_dir: bool = False

    def enabled(self) -> list[str]:
        """Names of the capabilities that are switched on."""
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass(frozen=True)
class ProviderDescriptor:
    """Static metadata and credential mapping for one rclone backend."""

    type: str
    display_name: str
    auth_types: frozenset[str]
    setup_fn: SetupFn = field(repr=False, compare=False)
    features: ProviderFeatures = field(default_factory=ProviderFeatures)
    docs: tuple[tuple[str, str], ...] = ()
    # Keys accepted as extra settings; informational, never enforced
    settings: tuple[str, ...] = ()

    def setup(self, credentials: Mapping[str, str], auth_type: Optional[str] = None) -> list[str]:
        """Build the credential part of a `config create` argument vector.

        Pure: identical inputs always give an identical list, and no I/O
        happens here.
        """
        return list(self.setup_fn(credentials, auth_type))

    def supports_auth(self, auth_type: str) -> bool:
        return auth_type in self.auth_types

    def describe(self) -> dict[str, object]:
        return {
            "type": self.type,
            "name": self.display_name,
            "auth_types": sorted(self.auth_types),
            "features": self.features.enabled(),
            "docs": [{"label": label, "url": url} for label, url in self.docs],
            "settings": list(self.settings),
        }


def cred(credentials: Mapping[str, str], key: str) -> str:
    """Credential value, or an empty string when the caller left it out."""
    value = credentials.get(key)
    return "" if value is None else str(value)


def obscured(value: str) -> str:
    """Wrap a secret in rclone's shell-substitution obscure syntax.

    The token is only expanded when the runner is configured to do so; see
    ``rclone_runner.expand_obscure_tokens``.
    """
    return f"{OBSCURE_TOKEN_PREFIX}{value}{OBSCURE_TOKEN_SUFFIX}"


def is_obscure_token(arg: str) -> bool:
    return arg.startswith(OBSCURE_TOKEN_PREFIX) and arg.endswith(OBSCURE_TOKEN_SUFFIX)


def unwrap_obscure_token(arg: str) -> str:
    return arg[len(OBSCURE_TOKEN_PREFIX):-len(OBSCURE_TOKEN_SUFFIX)]


def oauth_or(client_args: SetupFn) -> SetupFn:
    """Mapping for backends that take a `token` under oauth and keys otherwise."""

    def setup(creds: Mapping[str, str], auth_type: Optional[str]) -> list[str]:
        if auth_type == "oauth":
            return ["token", cred(creds, "token")]
        return client_args(creds, auth_type)

    return setup


def client_secret_args(creds: Mapping[str, str], auth_type: Optional[str] = None) -> list[str]:
    return ["client_id", cred(creds, "clientId"), "client_secret", obscured(cred(creds, "clientSecret"))]


def s3_compatible(provider: str, *tail: Callable[[Mapping[str, str]], list[str]] | str) -> SetupFn:
    """Mapping for S3-compatible backends that share rclone's `s3` driver.

    ``tail`` entries are either literal strings or callables producing
    extra arguments from the credentials; they follow the key pair in order.
    """

    def setup(creds: Mapping[str, str], auth_type: Optional[str]) -> list[str]:
        args = [
            "provider",
            provider,
            "access_key_id",
            cred(creds, "accessKeyId"),
            "secret_access_key",
            obscured(cred(creds, "secretKey")),
        ]
        for part in tail:
            if callable(part):
                args.extend(part(creds))
            else:
                args.append(part)
        return args

    return setup


def field_pair(key: str, cred_key: str) -> Callable[[Mapping[str, str]], list[str]]:
    """`key <credentials[cred_key]>` argument pair for use with s3_compatible."""
    return lambda creds: [key, cred(creds, cred_key)]
