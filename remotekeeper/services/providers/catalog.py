"""Static catalog of the rclone backends remotekeeper can configure.

Each entry maps the dashboard's credential field names (camelCase, as the
storage forms submit them) onto rclone's `config create` keys. Secrets are
wrapped with ``obscured`` so the sync CLI stores them obscured.

This module is data: keep logic in ``base.py``.
"""

from __future__ import annotations

from dataclasses import replace

from .base import (
    ProviderDescriptor,
    ProviderFeatures,
    client_secret_args,
    cred,
    field_pair,
    oauth_or,
    obscured,
    s3_compatible,
)

# =============================================================================
# FEATURE PROFILES
# =============================================================================

OBJECT_STORE = ProviderFeatures(
    copy=True, clean_up=True, list_r=True, stream_upload=True,
    multithread_upload=True, link_sharing=True,
)
S3_FEATURES = OBJECT_STORE
CLOUD_DRIVE = ProviderFeatures(
    purge=True, copy=True, move=True, dir_move=True, clean_up=True,
    list_r=True, stream_upload=True, multithread_upload=True,
    link_sharing=True, about=True, empty_dir=True,
)
FILE_HOST = ProviderFeatures(
    purge=True, copy=True, move=True, dir_move=True, link_sharing=True,
    about=True, empty_dir=True,
)
NETWORK_FS = ProviderFeatures(
    purge=True, move=True, dir_move=True, stream_upload=True, about=True,
    empty_dir=True,
)
READ_ONLY = ProviderFeatures()


def _p(
    type_: str,
    name: str,
    auth_types: tuple[str, ...],
    setup,
    features: ProviderFeatures = FILE_HOST,
    docs: tuple[tuple[str, str], ...] = (),
) -> ProviderDescriptor:
    return ProviderDescriptor(
        type=type_,
        display_name=name,
        auth_types=frozenset(auth_types),
        setup_fn=setup,
        features=features,
        docs=docs,
    )


# =============================================================================
# NATIVE BACKENDS
# =============================================================================

_NATIVE: list[ProviderDescriptor] = [
    _p("b2", "Backblaze B2", ("client",),
       lambda c, t: ["account", cred(c, "account"), "key", cred(c, "key")],
       ProviderFeatures(purge=True, copy=True, clean_up=True, list_r=True,
                        stream_upload=True, multithread_upload=True, link_sharing=True)),
    _p("s3", "AWS S3", ("client",),
       lambda c, t: [
           "access_key_id", cred(c, "accessKeyId"),
           "secret_access_key", obscured(cred(c, "secretKey")),
           "region", cred(c, "region"),
       ],
       S3_FEATURES),
    _p("drive", "Google Drive", ("client", "oauth"),
       lambda c, t: (
           ["token", cred(c, "token"), "scope", c.get("scope") or "drive"]
           if t == "oauth"
           else client_secret_args(c) + ["scope", c.get("scope") or "drive"]
       ),
       CLOUD_DRIVE),
    _p("onedrive", "One Drive", ("client", "oauth"), oauth_or(client_secret_args),
       ProviderFeatures(purge=True, copy=True, move=True, dir_move=True, clean_up=True,
                        list_r=True, link_sharing=True, about=True, empty_dir=True)),
    _p("dropbox", "DropBox", ("client", "oauth"), oauth_or(client_secret_args),
       ProviderFeatures(purge=True, copy=True, move=True, dir_move=True, list_r=True,
                        stream_upload=True, link_sharing=True, about=True, empty_dir=True)),
    _p("box", "Box.com", ("client", "oauth"), oauth_or(client_secret_args),
       ProviderFeatures(purge=True, copy=True, move=True, dir_move=True, clean_up=True,
                        link_sharing=True, about=True, empty_dir=True)),
    _p("azureBlob", "Azure Blob Storage", ("client", "password"),
       lambda c, t: ["account", cred(c, "account"), "key", obscured(cred(c, "key"))],
       ProviderFeatures(purge=True, copy=True, clean_up=True, list_r=True,
                        stream_upload=True, multithread_upload=True)),
    _p("gcs", "Google Cloud Storage", ("client", "oauth"),
       oauth_or(lambda c, t: [
           "project_number", cred(c, "projectNumber"),
           "service_account_file", cred(c, "serviceAccountFile"),
       ]),
       ProviderFeatures(purge=True, copy=True, list_r=True, stream_upload=True, link_sharing=True)),
    _p("mega", "Mega", ("password",),
       lambda c, t: ["user", cred(c, "user"), "pass", obscured(cred(c, "password"))],
       ProviderFeatures(purge=True, move=True, dir_move=True, clean_up=True,
                        link_sharing=True, about=True, empty_dir=True)),
    _p("pcloud", "pCloud", ("oauth", "client"), oauth_or(client_secret_args), CLOUD_DRIVE),
    _p("swift", "Oracle Swift", ("client", "password"),
       lambda c, t: [
           "user", cred(c, "user"),
           "key", obscured(cred(c, "key")),
           "auth", cred(c, "authUrl"),
           "tenant", cred(c, "tenant"),
       ],
       ProviderFeatures(purge=True, copy=True, list_r=True, stream_upload=True, about=True)),
    _p("storj", "Storj", ("client", "password"),
       lambda c, t: ["access_grant", cred(c, "accessGrant")],
       ProviderFeatures(purge=True, list_r=True, stream_upload=True, link_sharing=True)),
    _p("seafile", "SeaFile", ("password",),
       lambda c, t: [
           "url", cred(c, "url"),
           "user", cred(c, "user"),
           "pass", obscured(cred(c, "password")),
           "library", cred(c, "library"),
       ]),
    _p("jottacloud", "Jotta Cloud", ("client", "password"),
       lambda c, t: ["user", cred(c, "user"), "pass", obscured(cred(c, "password"))],
       CLOUD_DRIVE),
    _p("yandex", "Yandex Disk", ("client", "oauth"), oauth_or(client_secret_args), CLOUD_DRIVE),
    _p("zoho", "Zoho WorkDrive", ("client", "oauth"),
       oauth_or(lambda c, t: client_secret_args(c) + ["region", cred(c, "region")])),
    _p("hidrive", "HiDrive", ("client", "oauth"),
       oauth_or(lambda c, t: client_secret_args(c) + ["scope", cred(c, "scope")])),
    _p("koofr", "Koofr", ("client",),
       lambda c, t: [
           "endpoint", cred(c, "endpoint"),
           "user", cred(c, "email"),
           "password", obscured(cred(c, "password")),
       ]),
    _p("mailru", "Mail.ru Cloud", ("client", "oauth"),
       oauth_or(lambda c, t: ["user", cred(c, "user"), "password", obscured(cred(c, "password"))])),
    _p("opendrive", "Open Drive", ("password",),
       lambda c, t: ["username", cred(c, "username"), "password", obscured(cred(c, "password"))]),
    _p("qingstor", "QingStor", ("client",),
       lambda c, t: [
           "access_key_id", cred(c, "accessKeyId"),
           "secret_access_key", obscured(cred(c, "secretKey")),
           "zone", cred(c, "zone"),
       ],
       OBJECT_STORE),
    _p("premiumizeme", "Premiumize.me", ("client", "oauth"),
       oauth_or(lambda c, t: ["api_key", obscured(cred(c, "apiKey"))])),
    _p("putio", "Put.io", ("client", "oauth"),
       oauth_or(lambda c, t: ["token", obscured(cred(c, "token"))])),
    _p("sharefile", "Citrix ShareFile", ("client", "oauth"),
       oauth_or(lambda c, t: ["hostname", cred(c, "hostname")] + client_secret_args(c))),
    _p("sugarsync", "SugarSync", ("client",),
       lambda c, t: [
           "access_key_id", cred(c, "accessKeyId"),
           "private_access_key", obscured(cred(c, "privateKey")),
           "refresh_token", cred(c, "refreshToken"),
       ]),
    _p("1fichier", "1Fichier", ("client",),
       lambda c, t: ["api_key", obscured(cred(c, "apiKey"))]),
    _p("netstorage", "Akamai NetStorage", ("client",),
       lambda c, t: [
           "hostname", cred(c, "hostname"),
           "account_name", cred(c, "accountName"),
           "key", obscured(cred(c, "key")),
       ],
       NETWORK_FS),
    # Files.com accepts an API key or username/password; the form always sends the key
    _p("files", "Files.com", ("client", "password"),
       lambda c, t: ["api_key", obscured(cred(c, "apiKey"))]),
    _p("gofile", "GoFile", ("client",),
       lambda c, t: ["token", obscured(cred(c, "access_token"))]),
    _p("gphotos", "Google Photos", ("client", "password"),
       lambda c, t: client_secret_args(c),
       ProviderFeatures(about=True)),
    _p("internetarchive", "Internet Archive", ("client",),
       lambda c, t: [
           "access_key_id", cred(c, "accessKey"),
           "secret_access_key", obscured(cred(c, "secretKey")),
       ],
       ProviderFeatures(purge=True, copy=True, list_r=True, link_sharing=True)),
    _p("linkbox", "Linkbox", ("client",),
       lambda c, t: ["api_key", obscured(cred(c, "apiKey"))]),
    _p("oracle", "Oracle Object Storage", ("client",),
       lambda c, t: [
           "namespace", cred(c, "namespace"),
           "compartment", cred(c, "compartment"),
           "region", cred(c, "region"),
           "access_key", cred(c, "accessKey"),
           "secret_key", obscured(cred(c, "secretKey")),
       ],
       OBJECT_STORE),
    _p("pikpak", "PikPak", ("password",),
       lambda c, t: ["username", cred(c, "username"), "password", obscured(cred(c, "password"))]),
    _p("pixeldrain", "Pixeldrain", ("client",),
       lambda c, t: ["api_key", obscured(cred(c, "apiKey"))]),
    _p("proton", "Proton Drive", ("password",),
       lambda c, t: ["username", cred(c, "username"), "password", obscured(cred(c, "password"))]),
    _p("quatrix", "Quatrix by Maytech", ("client",),
       lambda c, t: [
           "api_key", obscured(cred(c, "apiKey")),
           "user", cred(c, "user"),
           "host", cred(c, "host"),
       ]),
    _p("sia", "Sia", ("client",),
       lambda c, t: ["api_url", cred(c, "apiUrl"), "password", obscured(cred(c, "password"))]),
    _p("ulozto", "Uloz.to", ("password",),
       lambda c, t: ["username", cred(c, "username"), "password", obscured(cred(c, "password"))]),
    _p("hdfs", "HDFS", ("password",),
       lambda c, t: ["namenode", cred(c, "namenode"), "username", cred(c, "username")],
       NETWORK_FS),
    _p("smb", "SMB", ("password",),
       lambda c, t: [
           "host", cred(c, "host"),
           "username", cred(c, "username"),
           "password", obscured(cred(c, "password")),
       ],
       NETWORK_FS),
    _p("sftp", "SFTP", ("password",),
       lambda c, t: ["host", cred(c, "host"), "user", cred(c, "user"), "pass", obscured(cred(c, "password"))],
       NETWORK_FS),
    _p("ftp", "FTP", ("password",),
       lambda c, t: ["host", cred(c, "host"), "user", cred(c, "user"), "pass", obscured(cred(c, "password"))],
       NETWORK_FS),
    _p("webdav", "WebDav", ("password",),
       lambda c, t: ["url", cred(c, "url"), "user", cred(c, "user"), "pass", obscured(cred(c, "password"))],
       NETWORK_FS),
    _p("http", "HTTP (Read Only)", ("noauth",),
       lambda c, t: ["url", cred(c, "url")],
       READ_ONLY),
    _p("filelu", "FileLu", ("client",),
       lambda c, t: ["key", obscured(cred(c, "key"))]),
    _p("filen", "Filen", ("password",),
       lambda c, t: [
           "email", cred(c, "email"),
           "password", obscured(cred(c, "password")),
           "api_key", obscured(cred(c, "apiKey")),
       ]),
    _p("internxt", "Internxt Drive", ("password",),
       lambda c, t: ["email", cred(c, "email"), "pass", obscured(cred(c, "password"))]),
    _p("shade", "Shade", ("client",),
       lambda c, t: ["drive_id", cred(c, "driveId"), "api_key", obscured(cred(c, "apiKey"))]),
]

# =============================================================================
# S3-COMPATIBLE BACKENDS (rclone `s3` driver with a `provider` key)
# =============================================================================

_region = field_pair("region", "region")
_endpoint = field_pair("endpoint", "endpoint")

_S3_COMPATIBLE: list[ProviderDescriptor] = [
    _p("r2", "Cloudflare R2", ("client",),
       s3_compatible("Cloudflare",
                     lambda c: ["endpoint", f"{cred(c, 'endpoint')}.r2.cloudflarestorage.com"],
                     "acl", "private"),
       S3_FEATURES),
    _p("oss", "Alibaba Cloud Object Storage System (OSS)", ("client",),
       s3_compatible("Alibaba", _endpoint, "acl", "private",
                     field_pair("storage_class", "storage_class")),
       S3_FEATURES),
    _p("ceph", "Ceph", ("client",),
       s3_compatible("Ceph", _endpoint, "acl", "private"),
       S3_FEATURES),
    _p("dreamobjects", "DreamObjects", ("client",),
       s3_compatible("DreamHost", _endpoint, "acl", "private"),
       S3_FEATURES),
    _p("spaces", "DigitalOcean Spaces", ("client",),
       s3_compatible("DigitalOcean", _endpoint),
       S3_FEATURES),
    _p("obs", "Huawei OBS", ("client",),
       s3_compatible("HuaweiOBS", _region, _endpoint, "acl", "private"),
       S3_FEATURES),
    _p("ibmcos", "IBM Cloud Object Storage", ("client",),
       s3_compatible("IBMCOS", _region, _endpoint,
                     field_pair("location_constraint", "location_constraint"),
                     "acl", "private"),
       S3_FEATURES),
    _p("idrive", "IDrive e2", ("client",),
       s3_compatible("IDrive", _endpoint),
       S3_FEATURES),
    _p("ionos", "IONOS Cloud", ("client",),
       s3_compatible("IONOS", _endpoint),
       S3_FEATURES),
    _p("minio", "Minio", ("client",),
       s3_compatible("Minio", _endpoint, _region),
       S3_FEATURES),
    _p("outscale", "Outscale Object Storage", ("client",),
       s3_compatible("Outscale",
                     lambda c: ["endpoint", f"oos.{cred(c, 'region')}.outscale.com"],
                     _region),
       S3_FEATURES),
    _p("qiniu", "Qiniu Object Storage (KODO)", ("client",),
       s3_compatible("Qiniu",
                     lambda c: ["endpoint", f"s3.{cred(c, 'region')}.qiniucs.com"],
                     _region,
                     field_pair("location_constraint", "region"),
                     field_pair("storage_class", "storage_class"),
                     field_pair("acl", "acl")),
       S3_FEATURES,
       (("EndPoints & Regions", "https://developer.qiniu.com/kodo/4088/s3-access-domainname"),)),
    _p("rackcorp", "RackCorp", ("client",),
       s3_compatible("RackCorp",
                     lambda c: ["endpoint", f"{cred(c, 'region')}.s3.rackcorp.com"],
                     _region,
                     field_pair("location_constraint", "region")),
       S3_FEATURES,
       (("RackCorp S3 Storage Documentation",
         "https://wiki.rackcorp.com/books/help-and-support-en/page/s3-storage-settings"),)),
    _p("rclone", "Rclone Serve S3", ("client",),
       s3_compatible("Rclone", _endpoint, "use_multipart_uploads", "false"),
       S3_FEATURES,
       (("Rclone S3 Documentation", "https://rclone.org/commands/rclone_serve_s3"),)),
    _p("scaleway", "Scaleway Object Storage", ("client",),
       s3_compatible("Scaleway", _endpoint, _region,
                     field_pair("location_constraint", "region"),
                     "upload_cutoff", "5M",
                     "chunk_size", "5M",
                     "copy_cutoff", "5M",
                     lambda c: ["acl", c.get("acl") or "private"]),
       S3_FEATURES,
       (("Scaleway Object Storage Quickstart",
         "https://www.scaleway.com/en/docs/object-storage/quickstart/"),)),
    _p("lyvecloud", "Seagate LyveCloud", ("client",),
       s3_compatible("LyveCloud", _endpoint),
       S3_FEATURES,
       (("Seagate LyveCloud Quickstart", "https://help.lyvecloud.seagate.com/en/quick-start-guide.html"),)),
    _p("seaweedfs", "SeaweedFS", ("client",),
       s3_compatible("SeaweedFS", _endpoint),
       S3_FEATURES,
       (("SeaweedFS Documentation", "https://seaweedfs.com/docs/admin/setup/"),)),
    _p("selectel", "Selectel", ("client",),
       s3_compatible("Selectel", "endpoint", "s3.ru-1.storage.selcloud.ru",
                     "region", "ru-1", "acl", "private"),
       S3_FEATURES,
       (("Selectel S3 Documentation",
         "https://docs.selectel.ru/en/api/object-storage-s3/#section/Getting-started"),)),
    _p("wasabi", "Wasabi", ("client",),
       s3_compatible("Wasabi",
                     lambda c: ["endpoint", _wasabi_endpoint(cred(c, "region"))],
                     _region),
       S3_FEATURES,
       (("Wasabi Quickstart", "https://docs.wasabi.com/v1/docs/getting-started"),
        ("Wasabi Regions & Endpoints",
         "https://docs.wasabi.com/v1/docs/what-are-the-service-urls-for-wasabi-s-different-storage-regions"))),
    _p("leviia", "Leviia", ("client",),
       s3_compatible("Leviia", _endpoint, "acl", "private"),
       S3_FEATURES),
    _p("liara", "Liara", ("client",),
       s3_compatible("Liara", "endpoint", "storage.iran.liara.space"),
       S3_FEATURES,
       (("Liara Storage Documentation", "https://docs.liara.ir/object-storage/about/"),)),
    _p("linode", "Linode Object Storage", ("client",),
       s3_compatible("Linode", _endpoint),
       S3_FEATURES,
       (("Linode Object Storage Quickstart",
         "https://techdocs.akamai.com/cloud-computing/docs/getting-started-with-object-storage"),)),
    _p("magalu", "Magalu", ("client",),
       s3_compatible("Magalu", _endpoint),
       S3_FEATURES,
       (("Magalu Cloud Storage Quickstart",
         "https://docs.magalu.cloud/docs/storage/object-storage/quickstart"),)),
    _p("arvan", "ArvanCloud", ("client",),
       s3_compatible("ArvanCloud", _region,
                     lambda c: ["endpoint", c.get("endpoint") or f"s3.{cred(c, 'region')}.arvanstorage.ir"]),
       S3_FEATURES,
       (("ArvanCloud Storage Documentation", "https://docs.arvancloud.ir/en/object-storage/dashboard"),)),
    _p("tencent", "Tencent Cloud Object Storage (COS)", ("client",),
       s3_compatible("TencentCOS", _endpoint),
       S3_FEATURES,
       (("Tencent Cloud Object Storage Quickstart", "https://www.tencentcloud.com/document/product/436/32955"),
        ("Tencent Cloud Object Storage Endpoints", "https://www.tencentcloud.com/document/product/436/6224"))),
    # Petabox runs in a single region
    _p("petabox", "Petabox", ("client",),
       s3_compatible("Petabox", "endpoint", "s3.petabox.io", "region", "eu-east-1"),
       S3_FEATURES,
       (("Petabox Documentation", "https://docs.petabox.io/"),)),
    _p("synologyc2", "Synology C2", ("client",),
       s3_compatible("Synology", _region,
                     lambda c: ["endpoint", f"{cred(c, 'region')}.s3.synologyc2.net"],
                     "no_check_bucket", "true"),
       S3_FEATURES,
       (("Synology C2 Object Storage Quick Start",
         "https://kb.synology.com/vi-vn/C2/tutorial/Quick_Start_C2_Object_Storage"),
        ("Retrieving Synology C2 Access Keys",
         "https://kb.synology.com/en-ca/C2/tutorial/C2_Object_Storage_Access_Key_Management"))),
]


def _wasabi_endpoint(region: str) -> str:
    # us-east-1 is served from the bare endpoint
    if not region or region == "us-east-1":
        return "s3.wasabisys.com"
    return f"s3.{region}.wasabisys.com"


# =============================================================================
# SETTING KEYS
# =============================================================================

# Keys `remote create --set` / `remote update --set` accept per backend.
# Credential keys produced by the setup mappings are listed too.
S3_SETTING_KEYS = (
    "access_key_id", "secret_access_key", "region", "endpoint",
    "location_constraint", "acl", "storage_class", "server_side_encryption",
    "upload_cutoff", "chunk_size", "copy_cutoff", "upload_concurrency",
    "force_path_style", "disable_checksum", "no_check_bucket", "list_chunk",
    "description",
)
DEFAULT_SETTING_KEYS = ("description",)

SETTING_KEYS: dict[str, tuple[str, ...]] = {
    "s3": ("env_auth", *S3_SETTING_KEYS),
    "1fichier": ("api_key", "shared_folder", "file_password", "folder_password", "cdn", "encoding", "description"),
    "filelu": ("key", "encoding", "description"),
    "filen": ("email", "password", "api_key", "encoding", "description"),
    "files": ("site", "api_key", "username", "password", "encoding", "description"),
    "gofile": ("access_token", "root_folder_id", "account_id", "list_chunk", "encoding", "description"),
    "hdfs": ("namenode", "username", "service_principal_name", "data_transfer_protection", "encoding", "description"),
    "http": ("url", "no_escape", "headers", "no_slash", "no_head", "description"),
    "internetarchive": (
        "access_key_id", "secret_access_key", "endpoint", "front_endpoint",
        "disable_checksum", "wait_archive", "encoding", "description",
    ),
    "internxt": ("email", "pass", "encoding", "description"),
    "linkbox": ("token", "description"),
    "mega": ("user", "pass", "debug", "hard_delete", "use_https", "encoding", "description"),
    "netstorage": ("host", "account", "secret", "protocol", "description"),
    "opendrive": ("username", "password", "encoding", "chunk_size", "description"),
    "pikpak": (
        "user", "pass", "device_id", "user_agent", "root_folder_id", "use_trash",
        "trashed_only", "no_media_link", "hash_memory_limit", "chunk_size",
        "upload_concurrency", "encoding", "description",
    ),
    "pixeldrain": ("api_key", "root_folder_id", "api_url", "description"),
    "shade": ("drive_id", "api_key", "encoding", "description"),
    "sia": ("api_url", "api_password", "user_agent", "encoding", "description"),
    "ulozto": ("username", "password", "app_token", "root_folder_slug", "list_page_size", "encoding", "description"),
}


def _with_settings(descriptor: ProviderDescriptor, fallback: tuple[str, ...]) -> ProviderDescriptor:
    return replace(descriptor, settings=SETTING_KEYS.get(descriptor.type, fallback))


CATALOG: tuple[ProviderDescriptor, ...] = (
    *(_with_settings(d, DEFAULT_SETTING_KEYS) for d in _NATIVE),
    *(_with_settings(d, S3_SETTING_KEYS) for d in _S3_COMPATIBLE),
)
