import os

# UIテストを表示環境なしで実行するため、オフスクリーン描画を使用します。
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
