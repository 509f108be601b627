"""Client script/style references and the inline init script."""

from __future__ import annotations

import json
from typing import Any

from ..config.runtime import RuntimeSettings
from ..models.export import ClientAssets, ExportPayload, ScriptAsset, StyleAsset

DFP_SCRIPT_HANDLE = "jquery.dfp.js"
DFW_SCRIPT_HANDLE = "jquery.dfw.js"
STYLE_HANDLE = "dfp"
EAGER_UNIT_SELECTOR = ".dfw-unit:not(.dfw-lazy-load)"


def build_client_assets(settings: RuntimeSettings) -> ClientAssets:
    """Script and stylesheet references; the vendor script is minified unless debugging."""
    suffix = "" if settings.debug else ".min"
    base = settings.asset_base_url
    version = settings.asset_version
    return ClientAssets(
        scripts=[
            ScriptAsset(
                handle=DFP_SCRIPT_HANDLE,
                src=f"{base}/js/vendor/jquery.dfp.js/jquery.dfp{suffix}.js",
                deps=["jquery"],
                version=version,
            ),
            ScriptAsset(
                handle=DFW_SCRIPT_HANDLE,
                src=f"{base}/js/jquery.dfw.js",
                deps=[DFP_SCRIPT_HANDLE],
                version=version,
            ),
        ],
        style=StyleAsset(handle=STYLE_HANDLE, src=f"{base}/css/dfp.css", version=version),
        data_handle=DFW_SCRIPT_HANDLE,
    )


def _js(value: Any) -> str:
    # "</" would end the surrounding script element early.
    return json.dumps(value).replace("</", "<\\/")


def render_init_script(payload: ExportPayload) -> str:
    """Inline script that initialises every eagerly loaded unit on the page."""
    return (
        '<script type="text/javascript">\n'
        f"\tjQuery('{EAGER_UNIT_SELECTOR}').dfp({{\n"
        f"\t\tdfpID: {_js(payload.network_code)},\n"
        "\t\tcollapseEmptyDivs: false,\n"
        f"\t\tsetTargeting: {_js(payload.targeting)},\n"
        f"\t\tsizeMapping: {_js(payload.mappings)}\n"
        "\t});\n"
        "</script>"
    )
