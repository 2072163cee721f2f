import re

BLANK_RUN_PATTERN = re.compile(r"\n{3,}")
GLYPH_BULLET_PATTERN = re.compile(r"^([ \t]*)[•·][ \t]+", re.MULTILINE)


def post_process_changelog(changelog: str, version_label: str) -> str:
    """생성된 체인지로그 Markdown 정리

    - 앞뒤 공백 제거
    - '#'로 시작하지 않으면 '## <버전>' 헤더 추가
    - 줄바꿈을 '\\n'으로 통일
    - 3줄 이상 연속 줄바꿈을 빈 줄 하나로 축소
    - '•', '·' 글머리표를 '- '로 변환

    같은 입력에 두 번 적용해도 결과가 같음
    """
    processed = changelog.strip()

    if not processed.startswith("#"):
        processed = f"## {version_label}\n\n{processed}"

    processed = processed.replace("\r\n", "\n").replace("\r", "\n")
    processed = BLANK_RUN_PATTERN.sub("\n\n", processed)
    processed = GLYPH_BULLET_PATTERN.sub(r"\1- ", processed)

    return processed.strip()
