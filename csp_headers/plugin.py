"""
Post-build hook invoked by the hosting build system.

The host passes:
    constants: mapping with PUBLISH_DIR
    utils:     object exposing utils.status.show(...) and utils.build.fail_plugin(...)
    inputs:    mapping of unsafeStyles / allowCloudfrontSource / reportUrl
"""

from csp_headers.core import setup_logger
from csp_headers.engine import GenerationResult, generate_headers
from csp_headers.errors import CSPHeadersError
from csp_headers.models import BuildSummary, PolicyConfig

logger = setup_logger("csp_headers.plugin")

SUCCESS_TITLE = "Source Hashing Completed Successfully"


def build_summary(result: GenerationResult) -> BuildSummary:
    pages = len(result.records)
    tags = result.tag_count
    text = "\n".join(
        f"file: {record.path}, "
        f"number of script tags added to CSP headers: {len(record.hash_lists.script)}, "
        f"number of style tags added to CSP headers: {len(record.hash_lists.style)}"
        for record in result.records
    )
    return BuildSummary(
        title=SUCCESS_TITLE,
        summary=f"{pages} Files Processed. {tags} tags processed",
        text=text,
        pages=pages,
        tags=tags,
    )


def on_post_build(constants, utils, inputs=None, environ=None):
    """
    Generates CSP records for the publish directory and reports the outcome to the host.
    Returns the BuildSummary on success, None after reporting a failure.
    """
    try:
        config = PolicyConfig.from_inputs(inputs, environ)
        result = generate_headers(constants["PUBLISH_DIR"], config)
    except CSPHeadersError as e:
        kind = e.kind.value if e.kind is not None else "FAILED"
        logger.error(f"[{kind}] {e}")
        utils.build.fail_plugin(str(e), error=e)
        return None
    except Exception as e:
        logger.exception(f"[FAILED] Unexpected error: {e}")
        utils.build.fail_plugin(str(e), error=e)
        return None

    summary = build_summary(result)
    logger.info(f"[POLICY] {summary.summary}")
    utils.status.show(title=summary.title, summary=summary.summary, text=summary.text)
    return summary
