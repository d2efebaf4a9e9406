import re
from typing import Optional

POST_URL_RE = re.compile(r"(?:twitter|x)\.com/[^/]+/status/(\d+)", re.IGNORECASE)


def extract_post_id(url: Optional[str]) -> Optional[str]:
	"""Достаёт числовой ID поста из ссылки вида x.com/<handle>/status/<id>"""
	if not url:
		return None
	match = POST_URL_RE.search(url)
	return match.group(1) if match else None
