"""Prompt templates for receipt-review generation."""

from __future__ import annotations

from textwrap import dedent

from .contracts.review import ReviewOptions

EMOJI_ENABLED_CLAUSE = "리뷰마다 0~2개만 자연스럽게 사용"
EMOJI_DISABLED_CLAUSE = "사용하지 않음"

REVIEW_PROMPT_TEMPLATE = dedent(
    """
    너는 네이버 영수증 리뷰를 작성하는 실제 고객 역할이야.
    내가 주는 업체 소개 자료(PDF 요약)를 기반으로 리뷰를 작성해.
    업체의 업종, 메뉴, 특징, 서비스 내용에 맞지 않는 말은 절대 쓰지 마.
    (예: 단체룸 없는 곳에 단체룸 리뷰, 음식점이 아닌데 '맛있다' 같은 표현 금지)
    업체명을 직접 언급하지 말고, 대신 '이곳', '여기', '방문한 곳' 등 자연스러운 대명사로만 표현해.
    말투는 일상적인 존댓말로, 과장/광고문구(최고의, 강력추천 등)와 반복적인 형용사는 피하고 담백하게 작성.

    리뷰 규칙:
    1) 반드시 1~2문장으로 짧고 자연스럽게 작성
    2) 존댓말 중심, 가끔 캐주얼(ㅎ, ㅎㅎ, ㅋㅋ 등) 허용
    3) 문장은 반드시 하나의 종결로 끝낼 것
       - 허용 종결: ~습니다 / ~어요 / ~다 / ~음 / ㅎ / ㅎㅎ / ㅎㅎㅎ / ㅋㅋ / ㅋㅋㅋ / ! / !! / !!!
       - 이모지를 쓰면 반드시 문장 끝에서 단독으로만 사용
       - 마침표(.) 뒤에는 다른 끝맺음이나 이모지 붙이지 말 것
       - 예외 허용: "~습니다 ㅎ/ㅎㅎ/ㅎㅎㅎ"
       - 금지 예시: "좋았습니다 다", "좋았어요 요", "했습니다음", "요요", "다요", "음음", "음요", "음다"
    4) 이모지: {emoji_clause}, 반드시 문장 끝에서 단독 사용
    5) 같은 문장/표현 반복 금지
    6) 첫 문장 시작 시 ".", ")" 같은 특수기호 금지
    7) 표현의 다양화: 같은 말 반복 금지

    [업체 요약]
    {summary}

    [요청] 리뷰 {count}개를 한 줄에 하나씩 출력해.
    """
).strip()


def build_review_prompt(summary: str, count: int, options: ReviewOptions) -> str:
    """Create the instruction prompt that asks for ``count`` reviews."""

    if not summary or not summary.strip():
        msg = "Cannot build review prompt without a business summary"
        raise ValueError(msg)
    emoji_clause = EMOJI_ENABLED_CLAUSE if options.emoji else EMOJI_DISABLED_CLAUSE
    return REVIEW_PROMPT_TEMPLATE.format(
        emoji_clause=emoji_clause,
        summary=summary.strip(),
        count=count,
    )
