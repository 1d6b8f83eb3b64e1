from typing import Optional
import re
import bleach
from bleach.html5lib_shim import Filter

# 본문 렌더링 시 허용하는 태그 (그 외 태그는 제거, 텍스트는 유지)
ALLOWED_TAGS = frozenset({
    "b", "strong", "i", "em", "u", "br",
    "h1", "h2", "h3",
    "p", "a",
})
ALLOWED_ATTRS = {
    "a": ["href", "title"],
}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# 내용까지 통째로 버리는 블록: script/style/noscript
_UNSAFE_BLOCK_RE = re.compile(
    r"<(script|style|noscript)\b[^>]*>.*?</\1\s*>",
    flags=re.IGNORECASE | re.DOTALL,
)


class _DoubleQuoteAttrFilter(Filter):
    """
    속성값의 " 를 &quot; 로 미리 바꿔 둠.
    값에 " 만 있으면 직렬화기가 작은따옴표로 감싸고, 그 경우 & 가 매 패스마다 다시 escape 됨.
    """

    def __iter__(self):
        for token in super().__iter__():
            if token["type"] in ("StartTag", "EmptyTag") and token.get("data"):
                token["data"] = {
                    key: value.replace('"', "&quot;") for key, value in token["data"].items()
                }
            yield token


def _cleaner() -> bleach.Cleaner:
    # Cleaner 는 파서 상태를 가지므로 호출마다 생성 (스레드풀에서 공유 금지)
    return bleach.Cleaner(
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[_DoubleQuoteAttrFilter],
    )


def _drop_unsafe_blocks(html: str) -> str:
    # "<scr<script></script>ipt>" 처럼 제거 후 다시 생기는 블록까지 반복 제거
    while True:
        cleaned = _UNSAFE_BLOCK_RE.sub("", html)
        if cleaned == html:
            return cleaned
        html = cleaned


def sanitize(raw_html: Optional[str]) -> str:
    """
    작성자가 입력한 HTML 을 허용 목록 기준으로 정화.
    - 허용 태그/속성만 유지, 나머지 태그는 escape 하지 않고 제거
    - script/style/noscript 는 내용까지 제거 (닫히지 않은 블록은 태그만 제거)
    - javascript: 등 허용되지 않은 프로토콜의 href 제거
    - 예외를 던지지 않으며 sanitize(sanitize(x)) == sanitize(x)
    """
    if not raw_html:
        return ""
    return _cleaner().clean(_drop_unsafe_blocks(raw_html))
