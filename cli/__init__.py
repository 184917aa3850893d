# cli - Click 명령과 콘솔 출력
