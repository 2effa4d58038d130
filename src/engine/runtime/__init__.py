"""
どこで: `engine.runtime` サブパッケージ。
何を: FrameProducer/FrameChannel/FrameArena によるフレーム生成スレッドと表示ループ間の受け渡しを提供。
なぜ: 生成と表示の責務を分離し、背圧付きのフレーム更新と例外伝播を両立するため。
"""
