# cli/commands.py
import argparse
import asyncio
import json
import logging
from datetime import datetime
from config.settings import DEFAULT_BATCH_SIZE, HISTORY_SOURCE, MAX_BATCH_SIZE
from models.filter_config import FilterConfig
from services.data_service import HistoricalDataService
from services.batch_generator import BatchGenerator
from services.game_generator import GameGenerator
from utils.exceptions import ConfigurationError, ValidationError
from utils.formatters import ResultFormatter

logger = logging.getLogger("lotto_generator")


class CLI:
    """메가세나 번호 생성기 CLI"""

    def __init__(self):
        self.data_service = HistoricalDataService()
        self.parser = self._create_parser()

    def _create_parser(self):
        """명령줄 파서 생성"""
        parser = argparse.ArgumentParser(
            description="메가세나 통계 필터 기반 번호 생성기"
        )

        subparsers = parser.add_subparsers(dest="command", help="명령")

        # 번호 생성 명령
        generate_parser = subparsers.add_parser("generate", help="추천 번호 생성")
        generate_parser.add_argument(
            "--count", type=int, default=DEFAULT_BATCH_SIZE,
            help=f"생성할 게임 수 (기본값: {DEFAULT_BATCH_SIZE}, 최대: {MAX_BATCH_SIZE})"
        )
        generate_parser.add_argument(
            "--history", default=HISTORY_SOURCE,
            help="과거 당첨 데이터 JSON 경로 또는 URL (기본값: HISTORY_SOURCE 환경 변수)"
        )
        generate_parser.add_argument(
            "--output", choices=["text", "json"], default="text",
            help="출력 형식 (기본값: text)"
        )
        generate_parser.add_argument(
            "--allow-overlap", action="store_true",
            help="게임 간 번호 중복 허용 (배치 내 고유성 정책 해제)"
        )
        generate_parser.add_argument(
            "--max-attempts", type=int, default=None,
            help="게임당 최대 시도 횟수 (1-10000)"
        )
        generate_parser.add_argument(
            "--save", action="store_true",
            help="결과를 파일로 저장"
        )

        # 과거 데이터 요약 명령
        history_parser = subparsers.add_parser("history", help="과거 당첨 데이터 요약")
        history_parser.add_argument(
            "--history", default=HISTORY_SOURCE,
            help="과거 당첨 데이터 JSON 경로 또는 URL"
        )
        history_parser.add_argument(
            "--output", choices=["text", "json"], default="text",
            help="출력 형식 (기본값: text)"
        )

        return parser

    def run(self, argv=None):
        """CLI 실행"""
        args = self.parser.parse_args(argv)

        if not args.command:
            self.parser.print_help()
            return

        if args.command == "generate":
            self._handle_generate(args)
        elif args.command == "history":
            self._handle_history(args)

    def _load_history(self, source):
        """과거 데이터 로드 (실패해도 균등 가중치로 계속 진행)"""
        success = asyncio.run(self.data_service.load_historical_data(source))
        if not success and source:
            print(f"주의: {self.data_service.load_warning}")
        return success

    def _handle_generate(self, args):
        """번호 생성 명령 처리"""
        logger.info(f"추천 번호 생성 중 (게임 수: {args.count})")

        self._load_history(args.history)

        overrides = {}
        if args.allow_overlap:
            overrides["unique_across_batch"] = False
        if args.max_attempts is not None:
            overrides["max_attempts"] = args.max_attempts

        try:
            config = FilterConfig.from_settings(**overrides)
        except ConfigurationError as e:
            print(f"설정 오류: {e.message}")
            return

        frequency = self.data_service.get_frequency_table()
        generator = BatchGenerator(GameGenerator(config))

        try:
            batch = generator.generate_batch(
                count=args.count,
                frequency=frequency,
                last_draw=self.data_service.get_last_draw()
            )
        except ValidationError as e:
            print(f"입력 오류: {e.message}")
            return

        # 결과 출력
        if args.output == "text":
            result = ResultFormatter.format_batch_to_text(batch, frequency)
        else:
            result = ResultFormatter.format_batch_to_json(batch, frequency)

        print(result)

        # 결과 저장
        if args.save:
            filename = f"games_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            filename += ".json" if args.output == "json" else ".txt"
            with open(filename, "w", encoding="utf-8") as f:
                f.write(result)

            print(f"생성 결과가 저장되었습니다: {filename}")

    def _handle_history(self, args):
        """과거 데이터 요약 명령 처리"""
        self._load_history(args.history)
        summary = self.data_service.get_summary()

        if args.output == "text":
            print(ResultFormatter.format_summary_to_text(summary))
        else:
            print(json.dumps(summary, indent=2, ensure_ascii=False))
