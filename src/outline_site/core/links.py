"""Rewrite links to Outline documents into links to the public site."""

from urllib.parse import quote, urljoin

from outline_site.models.document import PathIndex

# Characters left alone when encoding a URL reference: reserved delimiters,
# unreserved marks, and "%" so already-encoded input is not encoded twice.
_URL_SAFE = ":/?#[]@!$&'()*+,;=%~"


def resolve_url(base: str, ref: str) -> str:
    """Resolve ``ref`` against ``base`` the way a browser serializes the result.

    Spaces and non-ASCII characters in ``ref`` are percent-encoded first.
    """
    return urljoin(base, quote(ref, safe=_URL_SAFE))


def rewrite_links(index: PathIndex, html: str, *, source_base: str, site_base: str) -> str:
    """Point every Outline document URL in ``html`` at its public path.

    For each entry, in index order, absolute Outline URLs are replaced first and
    then any remaining relative ones, before moving on to the next entry. This
    is plain substring replacement, so matches inside text are rewritten too.
    """
    for path, entry in index.items():
        old_url = resolve_url(source_base, entry.url)
        new_url = resolve_url(site_base, path)

        html = html.replace(old_url, new_url).replace(entry.url, path)

    return html
